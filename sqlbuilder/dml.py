"""
==================================================
Statement builders for DELETE, INSERT and UPDATE.
==================================================

Each builder is bound to one table, accumulates configuration through chained
calls that return the builder itself, and renders one parameterized statement
from ``build()``.

Builders:
- DeleteBuilder: ``DELETE FROM t WHERE ...``
- InsertBuilder: ``INSERT INTO t (cols) VALUES (vals)``
- UpdateBuilder: ``UPDATE t SET c = v, ... WHERE ...``

The SELECT builder lives in ``sqlbuilder.query_builder`` and shares the
StatementBuilder base defined here.

Usage:
    from sqlbuilder.dml import InsertBuilder, UpdateBuilder

    sql, params = (
        InsertBuilder('mytable')
        .pair('firstName', 'Fred')
        .pair('lastName', 'Flintstone')
        .build()
    )
    # INSERT INTO mytable (firstName, lastName) VALUES (?, ?)
    # ['Fred', 'Flintstone']

    statement = (
        UpdateBuilder('mytable')
        .pair('firstName', 'Betty')
        .primary('id', 42)
        .build()
    )
    # UPDATE mytable SET firstName = ? WHERE (id = ?)
    # ['Betty', 42]

Literal SQL:
    ``pair_literal()``, ``expression_literal()`` and ``primary(..., literal=True)``
    write their value into the statement text unescaped. They are the only
    calls that do so, and the caller is responsible for what they pass in.
"""

import logging
from typing import Any, List, Optional

from core.config import config
from sqlbuilder import entity
from sqlbuilder.conditions import Clause, Expression, Primary, require_column
from sqlbuilder.exceptions import MalformedConditionError
from sqlbuilder.pairs import Pair, PairList
from sqlbuilder.params import ParameterAccumulator, Statement
from sqlbuilder.vocabulary import SqlOperator
from sqlbuilder.where import WhereClause, wildcard_operator

logger = logging.getLogger(__name__)


class StatementBuilder:
    """Common configuration surface for all statement builders.

    Holds the table name, a PairList and a WhereClause. Subclasses implement
    ``_render()`` to lay out their clauses in a fixed order.

    Attributes:
        table: Target table name
        pairs: Column/value pairs (INSERT, UPDATE) or projected columns (SELECT)
        where: Filter conditions (DELETE, SELECT, UPDATE)
        sql: Text produced by the most recent ``build()`` (diagnostics only)
        params: Parameters produced by the most recent ``build()``
    """

    def __init__(self, table: str):
        self.table = require_column(table, 'table')
        self.pairs = PairList()
        self.where = WhereClause()
        self.sql: Optional[str] = None
        self.params: List[Any] = []

    # --- Filter configuration ---

    def all(self) -> 'StatementBuilder':
        """Allow the statement to run without any WHERE restriction."""
        self.where.allow_all = True
        return self

    def or_(self, enabled: bool = True) -> 'StatementBuilder':
        """Join conditions with OR instead of AND."""
        self.where.use_or = enabled
        return self

    def expression(self, column: str, operator, value: Any) -> 'StatementBuilder':
        """Filter on ``column <operator> ?`` with ``value`` bound.

        A None value is allowed with EQ (IS NULL) and NE (IS NOT NULL) only;
        anything else fails when the statement is built.
        """
        self.where.add(Expression(
            require_column(column), SqlOperator.coerce(operator), value
        ))
        return self

    def expression_literal(self, column: str, operator, value: Any) -> 'StatementBuilder':
        """Filter on ``column <operator> <value>`` with ``value`` written verbatim."""
        self.where.add(Expression(
            require_column(column), SqlOperator.coerce(operator), value, literal=True
        ))
        return self

    def clause(self, left: str, operator, right: str) -> 'StatementBuilder':
        """Filter on a comparison between two columns."""
        self.where.add(Clause(
            require_column(left, 'left column'),
            SqlOperator.coerce(operator),
            require_column(right, 'right column'),
        ))
        return self

    def match(self, column: str, value: Any) -> 'StatementBuilder':
        """Filter with LIKE when ``value`` contains '%', otherwise with EQ."""
        return self.expression(column, wildcard_operator(value), value)

    def primary(self, column: str, value: Any = None, literal: bool = False) -> 'StatementBuilder':
        """Restrict the statement to one primary key.

        A primary restriction replaces every expression and clause. On an
        INSERT only the column name is used, to leave the generated key out
        of the column list. DELETE, SELECT and UPDATE need a value; building
        them with a bare ``primary(column)`` raises MalformedConditionError.

        Args:
            column: Primary-key column name
            value: Key value (bound unless ``literal`` is True)
            literal: Write ``value`` into the statement verbatim
        """
        self.where.primary = Primary(require_column(column), value, literal)
        return self

    def model(self, model: Any) -> 'StatementBuilder':
        """Restrict the statement to the primary key of ``model``."""
        return self.primary(*entity.primary_of(model))

    # --- Pair configuration ---

    def pair(self, column: str, value: Any) -> 'StatementBuilder':
        """Add a column with a bound value (None renders as NULL)."""
        self.pairs.add(Pair(require_column(column), value))
        return self

    def pair_if_not_null(self, column: str, value: Any) -> 'StatementBuilder':
        """Add the pair only when ``value`` is not None."""
        if value is not None:
            self.pair(column, value)
        return self

    def pair_literal(self, column: str, value: Any) -> 'StatementBuilder':
        """Add a column whose value is written verbatim, e.g. ``now()``."""
        self.pairs.add(Pair(require_column(column), value, literal=True))
        return self

    def pair_model(self, model: Any) -> 'StatementBuilder':
        """Seed the primary key and audit timestamps from ``model``."""
        self.model(model)
        for column, value in entity.audit_pairs(model):
            self.pair(column, value)
        return self

    # --- Rendering ---

    def build(self, paramstyle: Optional[str] = None) -> Statement:
        """Render the statement and its parameters.

        Every call starts from an empty parameter list, so building twice
        gives the same result.

        Args:
            paramstyle: DB-API paramstyle for placeholders (defaults to
                ``config.builder.paramstyle``)

        Returns:
            Statement(sql, params)

        Raises:
            StatementBuilderError: If the configuration cannot produce a
                valid statement
        """
        acc = ParameterAccumulator(paramstyle or config.builder.paramstyle)
        sql = self._render(acc)
        self.sql = sql
        self.params = acc.params
        logger.debug(f"Built {type(self).__name__}: {sql} {self.params}")
        return acc.statement(sql)

    def _render(self, acc: ParameterAccumulator) -> str:
        raise NotImplementedError

    def _describe(self) -> List[str]:
        return [
            f"table={self.table!r}",
            f"pairs={self.pairs!r}",
            f"where={self.where!r}",
        ]

    def __repr__(self) -> str:
        parts = self._describe() + [f"sql={self.sql!r}", f"params={self.params!r}"]
        return f"{type(self).__name__}[{', '.join(parts)}]"


class DeleteBuilder(StatementBuilder):
    """Builder for ``DELETE FROM <table> [WHERE ...]``.

    Example:
        >>> DeleteBuilder('mytable').primary('id', 123).build()
        Statement(sql='DELETE FROM mytable WHERE (id = ?)', params=[123])
    """

    def _render(self, acc: ParameterAccumulator) -> str:
        return f"DELETE FROM {self.table}" + self.where.render(acc)


class InsertBuilder(StatementBuilder):
    """Builder for ``INSERT INTO <table> (cols) VALUES (vals)``.

    The column named through ``primary(column)`` is treated as generated by
    the database and left out of both lists. Filter conditions are ignored.

    Example:
        >>> InsertBuilder('mytable').pair_literal('firstName', "'Wilma'").pair('points', 5).build()
        Statement(sql="INSERT INTO mytable (firstName, points) VALUES ('Wilma', ?)", params=[5])
    """

    def __init__(self, table: str):
        super().__init__(table)
        self._returning = False

    def returning(self) -> 'InsertBuilder':
        """Append ``RETURNING <primary key>`` so the generated key can be fetched."""
        self._returning = True
        return self

    def _render(self, acc: ParameterAccumulator) -> str:
        primary = self.where.primary
        if self._returning and primary is None:
            raise MalformedConditionError("returning() requires primary(column) to name the key")

        sql = f"INSERT INTO {self.table}"
        sql += self.pairs.render_insert(acc, skip_column=primary.column if primary else None)
        if self._returning:
            sql += f" RETURNING {primary.column}"
        return sql

    def _describe(self) -> List[str]:
        return super()._describe() + [f"returning={self._returning}"]


class UpdateBuilder(StatementBuilder):
    """Builder for ``UPDATE <table> SET ... [WHERE ...]``.

    At least one pair is required, and the WHERE guard applies: without a
    primary key, a condition or ``all()``, ``build()`` fails.

    Example:
        >>> UpdateBuilder('mytable').all().pair_literal('points', '(points + 100)').build()
        Statement(sql='UPDATE mytable SET points = (points + 100)', params=[])
    """

    def _render(self, acc: ParameterAccumulator) -> str:
        sql = f"UPDATE {self.table}"
        sql += self.pairs.render_assignments(acc)
        sql += self.where.render(acc)
        return sql
