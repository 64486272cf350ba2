"""
==========================
Utility Functions Package.
==========================

Database connectivity and statement execution helpers shared by the
service layer.

Modules:
    database_utils: Engine creation, statement execution, error translation
"""

__version__ = "1.0.0"
__all__ = [
    'get_connection_string',
    'create_sqlalchemy_engine',
    'paramstyle_for',
    'execute_statement',
    'handle_persistence_error',
    'check_database_available',
    'wait_for_database',
    'DatabaseConnectionError',
]

from .database_utils import (
    DatabaseConnectionError,
    check_database_available,
    create_sqlalchemy_engine,
    execute_statement,
    get_connection_string,
    handle_persistence_error,
    paramstyle_for,
    wait_for_database,
)
