"""
========================
Column/value pair lists.
========================

Ordered column -> value assignments used three ways:

- INSERT: `` (c1, c2) VALUES (?, ?)``
- UPDATE: `` SET c1 = ?, c2 = ?``
- SELECT: ``c1, c2`` (values ignored) or ``*`` when empty

Per-pair value rendering (INSERT and UPDATE):
    - None         -> NULL, nothing bound
    - literal pair -> value written verbatim (caller-trusted SQL)
    - otherwise    -> placeholder, value bound
"""

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

from sqlbuilder.exceptions import EmptyAssignmentError
from sqlbuilder.params import ParameterAccumulator

NULL_VALUE = "NULL"


@dataclass(frozen=True)
class Pair:
    """A column and the value written to it."""

    column: str
    value: Any = None
    literal: bool = False

    def render_value(self, acc: ParameterAccumulator) -> str:
        if self.value is None:
            return NULL_VALUE
        if self.literal:
            return acc.literal(self.value)
        return acc.bind(self.value)


class PairList:
    """Ordered pairs; duplicate columns are kept as given."""

    def __init__(self):
        self._pairs: List[Pair] = []

    def add(self, pair: Pair) -> None:
        self._pairs.append(pair)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    @property
    def columns(self) -> List[str]:
        return [pair.column for pair in self._pairs]

    def render_insert(self, acc: ParameterAccumulator, skip_column: Optional[str] = None) -> str:
        """Render the column and VALUES lists of an INSERT.

        Args:
            acc: Parameter accumulator for the statement
            skip_column: Column left out of both lists (the generated primary key)

        Returns:
            `` (cols) VALUES (vals)`` with a leading space

        Raises:
            EmptyAssignmentError: If no pair remains after skipping
        """
        pairs = [pair for pair in self._pairs if pair.column != skip_column]
        if not pairs:
            raise EmptyAssignmentError("At least one column+value pair must be specified")

        # Columns first, then values; only values bind parameters
        columns = ", ".join(pair.column for pair in pairs)
        values = ", ".join(pair.render_value(acc) for pair in pairs)
        return f" ({columns}) VALUES ({values})"

    def render_assignments(self, acc: ParameterAccumulator) -> str:
        """Render `` SET c1 = v1, ...`` for an UPDATE.

        Raises:
            EmptyAssignmentError: If there are no pairs
        """
        if not self._pairs:
            raise EmptyAssignmentError("At least one column+value pair must be specified")
        assignments = ", ".join(
            f"{pair.column} = {pair.render_value(acc)}" for pair in self._pairs
        )
        return f" SET {assignments}"

    def render_projection(self) -> str:
        """Column list for SELECT, or '*' when empty."""
        if not self._pairs:
            return "*"
        return ", ".join(self.columns)

    def __repr__(self) -> str:
        return f"PairList({self._pairs!r})"
