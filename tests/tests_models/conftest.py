"""
Shared fixtures for models/ tests.

Key fixtures:
- customer_class: Customer model backed by the customers table
- engine: in-memory SQLite engine with a customers table
- service: ModelService bound to the Customer model
"""

from dataclasses import dataclass
from typing import Optional

import pytest

from models.base import Model
from models.service import ModelService
from utils.database_utils import create_sqlalchemy_engine

CUSTOMERS_DDL = """
CREATE TABLE customers (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    published TIMESTAMP,
    updated TIMESTAMP,
    version INTEGER NOT NULL DEFAULT 0,
    first_name TEXT NOT NULL,
    last_name TEXT,
    points INTEGER,
    UNIQUE (first_name, last_name)
)
"""


@dataclass(eq=False)
class Customer(Model):
    """Customer entity used throughout the model tests."""
    TABLE = 'customers'

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    points: Optional[int] = None


@pytest.fixture
def customer_class():
    """The Customer model class."""
    return Customer


@pytest.fixture
def engine():
    engine = create_sqlalchemy_engine('sqlite://')
    with engine.begin() as conn:
        conn.exec_driver_sql(CUSTOMERS_DDL)
    yield engine
    engine.dispose()


@pytest.fixture
def service(engine):
    return ModelService(engine, Customer)
