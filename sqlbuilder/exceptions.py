"""
=====================================
Statement builder configuration errors.
=====================================

All errors raised by the statement builders are programmer/configuration
errors. They are raised synchronously, either by the offending configuration
call or by ``build()``, and never leave a partially rendered statement behind.

Hierarchy:
    StatementBuilderError
    ├── UnrestrictedStatementError
    ├── EmptyAssignmentError
    ├── InvalidNullComparisonError
    └── MalformedConditionError (also a ValueError)
"""


class StatementBuilderError(Exception):
    """Base class for every error raised while configuring or building a statement."""
    pass


class UnrestrictedStatementError(StatementBuilderError):
    """Raised when a DELETE, SELECT or UPDATE would affect every row.

    A statement needs a primary condition, at least one filter condition,
    or an explicit ``all()`` call before it can be built.
    """
    pass


class EmptyAssignmentError(StatementBuilderError):
    """Raised when an INSERT or UPDATE has no column/value pairs to write."""
    pass


class InvalidNullComparisonError(StatementBuilderError):
    """Raised when a None value is compared with anything but EQ or NE."""
    pass


class MalformedConditionError(StatementBuilderError, ValueError):
    """Raised for a missing column name, operator, direction or paging value."""
    pass
