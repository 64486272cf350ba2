"""
====================================================
Parameterized SQL statement builders.
====================================================

Composable builders that accumulate pairs, conditions, grouping, ordering and
paging, then render one parameterized DELETE, INSERT, SELECT or UPDATE plus
its positional parameter list. Builders perform no I/O; execution belongs to
``utils.database_utils``.

Modules:
    vocabulary: SqlOperator and SqlDirection enumerations
    conditions: Expression, Clause, Primary and OrderBy value types
    where: WHERE clause assembler
    pairs: Column/value pair lists
    params: ParameterAccumulator and the Statement descriptor
    dml: DeleteBuilder, InsertBuilder, UpdateBuilder
    query_builder: SelectBuilder
    exceptions: Configuration errors raised by build()

Example:
    >>> from sqlbuilder import SelectBuilder, SqlOperator
    >>>
    >>> sql, params = (
    ...     SelectBuilder('mytable')
    ...     .expression('firstName', SqlOperator.GE, 'Fred')
    ...     .expression('points', SqlOperator.LT, 100)
    ...     .build()
    ... )
    >>> sql
    'SELECT * FROM mytable WHERE (firstName >= ?) AND (points < ?)'
    >>> params
    ['Fred', 100]
"""

__version__ = "1.0.0"
__all__ = [
    # Builders
    'DeleteBuilder', 'InsertBuilder', 'SelectBuilder', 'UpdateBuilder',
    'StatementBuilder',
    # Vocabulary and results
    'SqlOperator', 'SqlDirection', 'Statement',
    # Errors
    'StatementBuilderError', 'UnrestrictedStatementError', 'EmptyAssignmentError',
    'InvalidNullComparisonError', 'MalformedConditionError',
]

from .dml import DeleteBuilder, InsertBuilder, StatementBuilder, UpdateBuilder
from .exceptions import (
    EmptyAssignmentError,
    InvalidNullComparisonError,
    MalformedConditionError,
    StatementBuilderError,
    UnrestrictedStatementError,
)
from .params import Statement
from .query_builder import SelectBuilder
from .vocabulary import SqlDirection, SqlOperator
