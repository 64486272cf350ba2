"""
=============================
WHERE conditions and ordering.
=============================

Value types held by the statement builders:

- Expression: column compared to a value (bound, or literal when explicitly requested)
- Clause: column compared to another column
- Primary: equality on the primary-key column; overrides every other condition
- OrderBy: one ORDER BY term

Conditions render themselves without the surrounding parentheses; the
WHERE assembler in ``sqlbuilder.where`` adds those and joins them.
"""

from dataclasses import dataclass
from typing import Any

from sqlbuilder.exceptions import InvalidNullComparisonError, MalformedConditionError
from sqlbuilder.params import ParameterAccumulator
from sqlbuilder.vocabulary import SqlDirection, SqlOperator


def require_column(column: Any, role: str = 'column') -> str:
    """Validate a column reference.

    Args:
        column: Candidate column name
        role: Description used in the error message

    Returns:
        The column name unchanged

    Raises:
        MalformedConditionError: If the column is not a non-empty string
    """
    if not isinstance(column, str) or not column.strip():
        raise MalformedConditionError(f"{role} must be a non-empty string, got {column!r}")
    return column


@dataclass(frozen=True)
class Expression:
    """Compare a column with a value.

    When ``literal`` is True the value is written into the statement as-is;
    the caller is responsible for quoting it. This is the only place a
    condition value bypasses parameter binding.
    """

    column: str
    operator: SqlOperator
    value: Any
    literal: bool = False

    def render(self, acc: ParameterAccumulator) -> str:
        if self.value is None:
            if self.operator is SqlOperator.EQ:
                return f"{self.column} IS NULL"
            if self.operator is SqlOperator.NE:
                return f"{self.column} IS NOT NULL"
            raise InvalidNullComparisonError(
                f"Cannot use operator '{self.operator.name}' against a null value "
                f"(column '{self.column}')"
            )
        if self.literal:
            return f"{self.column} {self.operator.token} {acc.literal(self.value)}"
        return f"{self.column} {self.operator.token} {acc.bind(self.value)}"


@dataclass(frozen=True)
class Clause:
    """Compare two columns; never binds a parameter."""

    left: str
    operator: SqlOperator
    right: str

    def render(self, acc: ParameterAccumulator) -> str:
        return f"{self.left} {self.operator.token} {self.right}"


@dataclass(frozen=True)
class Primary:
    """Equality on the primary-key column.

    For INSERT only the column name matters: it marks the key the database
    will generate, so the value is ignored there.
    """

    column: str
    value: Any = None
    literal: bool = False

    def render(self, acc: ParameterAccumulator) -> str:
        if self.literal:
            return f"{self.column} = {acc.literal(self.value)}"
        return f"{self.column} = {acc.bind(self.value)}"


@dataclass(frozen=True)
class OrderBy:
    """A single ORDER BY term."""

    column: str
    direction: SqlDirection = SqlDirection.ASC

    def render(self) -> str:
        return f"{self.column} {self.direction.token}"
