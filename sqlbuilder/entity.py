"""
Entity adapter.

Seeds builder state from any object exposing ``id``, ``published`` and
``updated`` (normally a ``models.base.Model``). Carries no logic of its own
beyond choosing which column goes where.
"""

from typing import Any, List, Tuple

from models.base import ID_COLUMN, PUBLISHED_COLUMN, UPDATED_COLUMN


def primary_of(model: Any) -> Tuple[str, Any]:
    """(column, value) of the model's primary key."""
    return ID_COLUMN, model.id


def audit_pairs(model: Any) -> List[Tuple[str, Any]]:
    """(column, value) pairs for the audit timestamps."""
    return [
        (PUBLISHED_COLUMN, model.published),
        (UPDATED_COLUMN, model.updated),
    ]


def model_columns() -> List[str]:
    """Columns every model-backed table carries, for SELECT projections."""
    return [ID_COLUMN, PUBLISHED_COLUMN, UPDATED_COLUMN]
