"""
==================================================
Database execution utilities for built statements.
==================================================

Runs Statement objects produced by the builders against a SQLAlchemy
engine, and translates low-level persistence failures into application
exceptions.

This module is the only place that touches a database connection; the
builders themselves perform no I/O.

Key Features:
    - Connection string and engine creation from config
    - Execution of a Statement with positional parameters
    - Paramstyle discovery so statements match the driver
    - Database availability checks with bounded retries
    - Persistence-error classification (BadRequest / InternalServerError)

Example:
    >>> from sqlbuilder import SelectBuilder
    >>> from utils.database_utils import create_sqlalchemy_engine, execute_statement, paramstyle_for
    >>>
    >>> engine = create_sqlalchemy_engine('sqlite://')
    >>> statement = SelectBuilder('customers').all().build(paramstyle_for(engine))
    >>> with engine.connect() as conn:
    ...     rows = execute_statement(conn, statement).fetchall()
"""

import logging
import time
from typing import NoReturn, Optional
from urllib.parse import quote_plus

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, CursorResult, Engine, make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from core.config import config
from core.exceptions import ApplicationError, BadRequest, InternalServerError
from sqlbuilder.params import SUPPORTED_PARAMSTYLES, Statement

logger = logging.getLogger(__name__)

FOREIGN_KEY_MESSAGE = "foreignKey: Foreign key or unique key constraint violated"


class DatabaseConnectionError(Exception):
    """Exception raised when the database never becomes available."""
    pass


def get_connection_string(
    host: str = None,
    port: int = None,
    user: str = None,
    password: str = None,
    database: str = None
) -> str:
    """
    Build the connection string, falling back to config for missing pieces.

    With no arguments and ``DATABASE_URL`` configured, that URL is returned
    unchanged.

    Args:
        host: Database hostname (defaults to config.db_host)
        port: Database port (defaults to config.db_port)
        user: Database user (defaults to config.db_user)
        password: Database password (defaults to config.db_password)
        database: Database name (defaults to config.db_name)

    Returns:
        SQLAlchemy connection string
    """
    if all(value is None for value in (host, port, user, password, database)):
        return config.get_connection_string()

    host = host if host is not None else config.db_host
    port = port if port is not None else config.db_port
    user = user if user is not None else config.db_user
    password = password if password is not None else config.db_password
    database = database if database is not None else config.db_name

    return f"postgresql://{user}:{quote_plus(password)}@{host}:{port}/{database}"


def create_sqlalchemy_engine(
    url: Optional[str] = None,
    echo: bool = False,
    pool_size: int = 5,
    max_overflow: int = 10
) -> Engine:
    """
    Create SQLAlchemy engine.

    Pool sizing only applies to server databases; SQLite engines use the
    dialect's default pool.

    Args:
        url: Connection URL (defaults to get_connection_string())
        echo: Enable SQLAlchemy statement logging
        pool_size: Connection pool size
        max_overflow: Maximum overflow connections

    Returns:
        Configured SQLAlchemy Engine
    """
    url = url or get_connection_string()

    if make_url(url).get_backend_name() == 'sqlite':
        return create_engine(url, echo=echo)

    return create_engine(
        url,
        echo=echo,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_pre_ping=True  # Verify connections before using
    )


def paramstyle_for(engine: Engine) -> str:
    """
    Placeholder style the engine's driver expects.

    Args:
        engine: SQLAlchemy engine

    Returns:
        DB-API paramstyle understood by the builders

    Raises:
        ValueError: If the driver needs a style builders cannot produce
    """
    paramstyle = engine.dialect.paramstyle
    if paramstyle not in SUPPORTED_PARAMSTYLES:
        raise ValueError(f"Driver paramstyle '{paramstyle}' is not supported by the builders")
    return paramstyle


def execute_statement(connection: Connection, statement: Statement) -> CursorResult:
    """
    Execute a built statement on an open connection.

    Parameters are passed straight to the DB-API driver, bound positionally
    in the order the builder produced them.

    Args:
        connection: Open SQLAlchemy connection
        statement: Statement returned by a builder's build()

    Returns:
        SQLAlchemy CursorResult
    """
    logger.debug(f"Executing: {statement.sql} {statement.params}")
    return connection.exec_driver_sql(statement.sql, tuple(statement.params))


def handle_persistence_error(error: Exception) -> NoReturn:
    """
    Re-raise a persistence failure as an application exception.

    - ApplicationError: re-raised unchanged
    - IntegrityError: BadRequest with the driver's constraint message
    - anything else: InternalServerError

    Args:
        error: Exception raised while executing a statement

    Raises:
        ApplicationError: Always
    """
    if isinstance(error, ApplicationError):
        raise error

    if isinstance(error, IntegrityError):
        message = str(error.orig) if error.orig is not None else ''
        logger.warning(f"Constraint violated: {message or error}")
        raise BadRequest(message or FOREIGN_KEY_MESSAGE) from error

    logger.error(f"Persistence failure: {error}")
    raise InternalServerError(str(error)) from error


def check_database_available(engine: Engine) -> bool:
    """
    Check if the database behind an engine accepts connections.

    Args:
        engine: SQLAlchemy engine

    Returns:
        True if a trivial query succeeds, False otherwise
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.debug(f"Database not available: {e}")
        return False


def wait_for_database(
    engine: Engine,
    max_retries: int = 10,
    retry_delay: float = 2
) -> bool:
    """
    Wait for the database to become available with retries.

    Args:
        engine: SQLAlchemy engine
        max_retries: Maximum number of attempts
        retry_delay: Delay between attempts in seconds

    Returns:
        True once the database is available

    Raises:
        DatabaseConnectionError: If all attempts fail
    """
    target = engine.url.render_as_string(hide_password=True)
    logger.info(f"Waiting for database at {target}...")

    for attempt in range(1, max_retries + 1):
        if check_database_available(engine):
            logger.info(f"✅ Database is available (attempt {attempt}/{max_retries})")
            return True

        if attempt < max_retries:
            logger.warning(
                f"⏳ Database not available yet (attempt {attempt}/{max_retries}), "
                f"retrying in {retry_delay}s..."
            )
            time.sleep(retry_delay)

    error_msg = f"Database at {target} did not become available after {max_retries} attempts"
    logger.error(f"❌ {error_msg}")
    raise DatabaseConnectionError(error_msg)
