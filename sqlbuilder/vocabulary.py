"""
=====================================
SQL operator and direction vocabulary.
=====================================

Closed enumerations of the comparison operators and sort directions the
statement builders understand. Each member's value is the literal SQL token
that is written into the rendered statement.

Example:
    >>> from sqlbuilder.vocabulary import SqlDirection, SqlOperator
    >>> SqlOperator.GE.value
    '>='
    >>> SqlOperator.coerce('<>') is SqlOperator.NE
    True
    >>> SqlDirection.coerce('desc')
    <SqlDirection.DESC: 'DESC'>
"""

from enum import Enum
from typing import Union

from sqlbuilder.exceptions import MalformedConditionError


class _TokenEnum(Enum):
    """Enum whose members can be looked up by name or by SQL token."""

    @property
    def token(self) -> str:
        """SQL text for this member."""
        return self.value

    @classmethod
    def coerce(cls, value: Union['_TokenEnum', str, None]):
        """Resolve a member, a member name or an SQL token to a member.

        Args:
            value: Member instance, name (e.g. 'GE') or token (e.g. '>=')

        Returns:
            The matching member

        Raises:
            MalformedConditionError: If value is missing or not recognised
        """
        if isinstance(value, cls):
            return value
        if value is None:
            raise MalformedConditionError(f"{cls.__name__} cannot be None")
        if isinstance(value, str):
            candidate = value.strip().upper()
            if candidate in cls.__members__:
                return cls.__members__[candidate]
            for member in cls:
                if member.value == candidate:
                    return member
        raise MalformedConditionError(f"Unknown {cls.__name__}: {value!r}")

    def __str__(self) -> str:
        return self.value


class SqlOperator(_TokenEnum):
    """Comparison operators usable in WHERE conditions."""

    LT = '<'
    GT = '>'
    LE = '<='
    GE = '>='
    EQ = '='
    NE = '<>'
    LIKE = 'LIKE'


class SqlDirection(_TokenEnum):
    """Sort directions for ORDER BY."""

    ASC = 'ASC'
    DESC = 'DESC'
