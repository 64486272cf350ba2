"""
=======================
WHERE clause assembler.
=======================

Holds the filter state shared by DELETE, SELECT and UPDATE builders and
renders it into a single WHERE fragment.

Rendering rules, in order:
    1. A primary condition wins: `` WHERE (id = ?)`` and nothing else.
       It must carry a value; a bare primary only names the key on INSERT.
    2. No conditions but ``allow_all`` set: empty string (every row).
    3. No conditions and no override: UnrestrictedStatementError.
    4. Otherwise each condition in parentheses, joined uniformly by
       AND (default) or OR.

Example:
    >>> from sqlbuilder.params import ParameterAccumulator
    >>> where = WhereClause()
    >>> where.add(Expression('points', SqlOperator.LT, 100))
    >>> acc = ParameterAccumulator()
    >>> where.render(acc), acc.params
    (' WHERE (points < ?)', [100])
"""

from typing import List, Optional, Union

from sqlbuilder.conditions import Clause, Expression, Primary
from sqlbuilder.exceptions import MalformedConditionError, UnrestrictedStatementError
from sqlbuilder.params import ParameterAccumulator
from sqlbuilder.vocabulary import SqlOperator

Condition = Union[Expression, Clause]


class WhereClause:
    """Accumulated filter conditions for one statement."""

    def __init__(self):
        self.conditions: List[Condition] = []
        self.primary: Optional[Primary] = None
        self.allow_all = False
        self.use_or = False

    def add(self, condition: Condition) -> None:
        """Append a condition; conditions render in insertion order."""
        self.conditions.append(condition)

    def has_content(self) -> bool:
        """True when a primary or at least one condition is present."""
        return self.primary is not None or bool(self.conditions)

    def render(self, acc: ParameterAccumulator) -> str:
        """Render the WHERE fragment, binding values into ``acc``.

        Args:
            acc: Parameter accumulator for the statement being built

        Returns:
            `` WHERE ...`` including the leading space, or an empty string

        Raises:
            UnrestrictedStatementError: If nothing restricts the statement
                and ``allow_all`` is not set
            MalformedConditionError: If the primary condition has no value
            InvalidNullComparisonError: If a None value uses an operator
                other than EQ or NE
        """
        if self.primary is not None:
            if self.primary.value is None:
                raise MalformedConditionError(
                    f"Primary key '{self.primary.column}' has no value to restrict on"
                )
            return f" WHERE ({self.primary.render(acc)})"

        if not self.has_content():
            if self.allow_all:
                return ""
            raise UnrestrictedStatementError(
                "Statement has no primary key or WHERE conditions; "
                "call all() to affect every row"
            )

        joiner = " OR " if self.use_or else " AND "
        parts = [f"({condition.render(acc)})" for condition in self.conditions]
        return " WHERE " + joiner.join(parts)

    def __repr__(self) -> str:
        return (
            f"WhereClause(primary={self.primary!r}, conditions={self.conditions!r}, "
            f"allow_all={self.allow_all}, use_or={self.use_or})"
        )


def wildcard_operator(value) -> SqlOperator:
    """LIKE for strings containing the '%' wildcard, EQ for everything else."""
    if isinstance(value, str) and '%' in value:
        return SqlOperator.LIKE
    return SqlOperator.EQ
