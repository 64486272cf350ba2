"""
============================
SELECT statement builder.
============================

Clause order is fixed:

    SELECT [DISTINCT] <cols | *> FROM <table>
    [WHERE ...] [GROUP BY ...] [ORDER BY ...] [LIMIT n] [OFFSET n]

Usage:
    from sqlbuilder.query_builder import SelectBuilder
    from sqlbuilder.vocabulary import SqlDirection

    statement = (
        SelectBuilder('mytable')
        .all()
        .column('firstName', 'lastName')
        .order_by('lastName', SqlDirection.ASC)
        .limit(25)
        .offset(50)
        .build()
    )
    # SELECT firstName, lastName FROM mytable ORDER BY lastName ASC LIMIT 25 OFFSET 50
"""

from typing import Any, List, Optional

from sqlbuilder import entity
from sqlbuilder.conditions import OrderBy, require_column
from sqlbuilder.dml import StatementBuilder
from sqlbuilder.exceptions import MalformedConditionError
from sqlbuilder.pairs import Pair
from sqlbuilder.params import ParameterAccumulator
from sqlbuilder.vocabulary import SqlDirection

COUNT_LITERAL = "count(*)"


def _require_count(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise MalformedConditionError(f"{name} must be a non-negative integer, got {value!r}")
    return value


class SelectBuilder(StatementBuilder):
    """Builder for SELECT statements against a single table.

    Projected columns come from the pair list (values are ignored); with no
    pairs every column is selected.

    Example:
        >>> SelectBuilder('mytable').clause('firstName', 'NE', 'lastName').build()
        Statement(sql='SELECT * FROM mytable WHERE (firstName <> lastName)', params=[])
    """

    def __init__(self, table: str):
        super().__init__(table)
        self.group_bys: List[str] = []
        self.order_bys: List[OrderBy] = []
        self._distinct = False
        self._limit: Optional[int] = None
        self._offset: Optional[int] = None

    def column(self, *columns: str) -> 'SelectBuilder':
        """Project the given columns, in order."""
        for column in columns:
            self.pairs.add(Pair(require_column(column)))
        return self

    def column_model(self) -> 'SelectBuilder':
        """Project the id, published and updated columns shared by every model."""
        return self.column(*entity.model_columns())

    def count(self) -> 'SelectBuilder':
        """Project ``count(*)``."""
        self.pairs.add(Pair(COUNT_LITERAL))
        return self

    def distinct(self, enabled: bool = True) -> 'SelectBuilder':
        self._distinct = enabled
        return self

    def group_by(self, *columns: str) -> 'SelectBuilder':
        """Group by the given columns, applied in the order added."""
        for column in columns:
            self.group_bys.append(require_column(column))
        return self

    def order_by(self, column: str, direction=SqlDirection.ASC) -> 'SelectBuilder':
        """Sort by ``column``; terms apply in the order added."""
        self.order_bys.append(OrderBy(require_column(column), SqlDirection.coerce(direction)))
        return self

    def limit(self, count: int) -> 'SelectBuilder':
        """Return at most ``count`` rows."""
        self._limit = _require_count(count, 'limit')
        return self

    def offset(self, count: int) -> 'SelectBuilder':
        """Skip ``count`` rows before returning any."""
        self._offset = _require_count(count, 'offset')
        return self

    def _render(self, acc: ParameterAccumulator) -> str:
        select_keyword = "SELECT DISTINCT" if self._distinct else "SELECT"
        sql = f"{select_keyword} {self.pairs.render_projection()} FROM {self.table}"

        sql += self.where.render(acc)

        if self.group_bys:
            sql += " GROUP BY " + ", ".join(self.group_bys)

        if self.order_bys:
            sql += " ORDER BY " + ", ".join(order.render() for order in self.order_bys)

        if self._limit is not None:
            sql += f" LIMIT {self._limit}"

        if self._offset is not None:
            sql += f" OFFSET {self._offset}"

        return sql

    def _describe(self) -> List[str]:
        return super()._describe() + [
            f"distinct={self._distinct}",
            f"group_bys={self.group_bys!r}",
            f"order_bys={self.order_bys!r}",
            f"limit={self._limit!r}",
            f"offset={self._offset!r}",
        ]
