"""
================================================
Configuration management for the statement builder.
================================================

Loads all configuration from environment variables (.env file) and provides
a centralized Config singleton for application-wide access.

Settings:
    DATABASE_URL: Full SQLAlchemy URL; overrides the POSTGRES_* pieces
    POSTGRES_HOST / POSTGRES_PORT / POSTGRES_USER / POSTGRES_PASSWORD / POSTGRES_DB
    SQLBUILDER_PARAMSTYLE: Default placeholder style for build() (qmark)
    LOG_LEVEL: Default logging level (INFO)

Example:
    >>> from core.config import config
    >>>
    >>> # Database connection
    >>> engine_url = config.get_connection_string()
    >>>
    >>> # Placeholder style used when build() gets no paramstyle
    >>> config.builder.paramstyle
    'qmark'
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.parse import quote_plus

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)


@dataclass
class DatabaseConfig:
    """Database configuration settings.

    Attributes:
        host: PostgreSQL server hostname or IP address
        port: PostgreSQL server port number
        user: Database username
        password: Database password
        database: Database name
        url: Complete SQLAlchemy URL, used as-is when set
    """

    host: str
    port: int
    user: str
    password: str
    database: str
    url: Optional[str] = None

    def get_connection_string(self) -> str:
        """Get the SQLAlchemy connection string.

        Returns:
            ``url`` when configured, otherwise a PostgreSQL URL built from
            the individual settings
        """
        if self.url:
            return self.url
        return (
            f"postgresql://{self.user}:{quote_plus(self.password)}"
            f"@{self.host}:{self.port}/{self.database}"
        )


@dataclass
class BuilderConfig:
    """Statement builder settings.

    Attributes:
        paramstyle: DB-API paramstyle used when build() is called without one
        log_level: Default logging level for setup_logging()
    """

    paramstyle: str = 'qmark'
    log_level: str = 'INFO'


class Config:
    """Centralized configuration manager.

    Attributes:
        db: DatabaseConfig instance with database connection settings
        builder: BuilderConfig instance with statement builder settings

    Example:
        >>> config = Config()
        >>> print(f"Connecting to {config.db_host}:{config.db_port}")
    """

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.db = DatabaseConfig(
            host=os.getenv('POSTGRES_HOST', 'localhost'),
            port=int(os.getenv('POSTGRES_PORT', '5432')),
            user=os.getenv('POSTGRES_USER', 'postgres'),
            password=os.getenv('POSTGRES_PASSWORD', ''),
            database=os.getenv('POSTGRES_DB', 'postgres'),
            url=os.getenv('DATABASE_URL') or None
        )

        self.builder = BuilderConfig(
            paramstyle=os.getenv('SQLBUILDER_PARAMSTYLE', 'qmark'),
            log_level=os.getenv('LOG_LEVEL', 'INFO')
        )

    @property
    def db_host(self) -> str:
        """Get database server hostname."""
        return self.db.host

    @property
    def db_port(self) -> int:
        """Get database server port number."""
        return self.db.port

    @property
    def db_user(self) -> str:
        """Get database username."""
        return self.db.user

    @property
    def db_password(self) -> str:
        """Get database password."""
        return self.db.password

    @property
    def db_name(self) -> str:
        """Get database name."""
        return self.db.database

    def get_connection_string(self) -> str:
        """Get database connection string.

        Returns:
            SQLAlchemy-compatible connection string
        """
        return self.db.get_connection_string()


# Global configuration instance
config = Config()
