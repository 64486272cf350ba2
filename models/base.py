"""
===========================================================
Entity base class for builder-backed persistence.
===========================================================

Defines the Model base that every persisted entity extends, together with the
column-name constants for the fields every table carries.

Every table row backed by a Model has:
    id: Primary key, generated by the database on INSERT
    published: Timestamp the row was first stored
    updated: Timestamp the row was last modified
    version: Optimistic-lock counter, incremented on every UPDATE

Subclasses are dataclasses whose extra fields map one-to-one onto table
columns of the same name, and set ``TABLE`` to the table name.

Example:
    >>> from dataclasses import dataclass
    >>> from typing import Optional
    >>> from models.base import Model
    >>>
    >>> @dataclass(eq=False)
    ... class Customer(Model):
    ...     TABLE = 'customers'
    ...     first_name: Optional[str] = None
    ...     last_name: Optional[str] = None
    >>>
    >>> Customer(first_name='Fred').to_pairs()
    {'first_name': 'Fred', 'last_name': None}
"""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, ClassVar, Dict, List, Mapping, Optional

ID_COLUMN = 'id'
PUBLISHED_COLUMN = 'published'
UPDATED_COLUMN = 'updated'
VERSION_COLUMN = 'version'

COMMON_COLUMNS = (ID_COLUMN, PUBLISHED_COLUMN, UPDATED_COLUMN, VERSION_COLUMN)


def _to_datetime(value: Any) -> Optional[datetime]:
    """Drivers without native timestamp support hand back ISO-8601 strings."""
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    return value


@dataclass(eq=False)
class Model:
    """Base class for persisted entities.

    Attributes:
        id: Primary key (None until inserted)
        published: Creation timestamp
        updated: Last modification timestamp
        version: Optimistic-lock version number

    Equality and hashing use the concrete class and ``id`` only; the audit
    fields are ignored. A model without an id is only equal to itself.
    """

    TABLE: ClassVar[str] = ''

    id: Optional[int] = None
    published: Optional[datetime] = None
    updated: Optional[datetime] = None
    version: int = 0

    @classmethod
    def user_columns(cls) -> List[str]:
        """Names of the entity-specific columns, in declaration order."""
        return [f.name for f in fields(cls) if f.name not in COMMON_COLUMNS]

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> 'Model':
        """Create a model from a result row, ignoring columns not present.

        Args:
            row: Mapping of column name to value (e.g. ``Row._mapping``)

        Returns:
            New instance populated from the row
        """
        model = cls()
        for name in (f.name for f in fields(cls)):
            if name in row:
                setattr(model, name, row[name])
        model.published = _to_datetime(model.published)
        model.updated = _to_datetime(model.updated)
        return model

    def to_pairs(self) -> Dict[str, Any]:
        """Entity-specific column values to write on INSERT/UPDATE."""
        return {name: getattr(self, name) for name in self.user_columns()}

    def copy_from(self, other: 'Model') -> None:
        """Copy the user-modifiable fields of ``other`` into this model."""
        for name in self.user_columns():
            setattr(self, name, getattr(other, name))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Model) or type(self) is not type(other):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return object.__hash__(self)
        return hash((type(self), self.id))
