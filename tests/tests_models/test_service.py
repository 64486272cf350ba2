"""
=========================================
Pytest suite for models/service.py
=========================================

Sections:
---------
1. Integration tests - CRUD against in-memory SQLite
2. Edge case tests - NotFound, Conflict and constraint violations
3. Regression tests - Update keeps identity and audit fields

How to Execute:
---------------
All tests:          pytest tests/tests_models/test_service.py -v
"""

from dataclasses import replace
from datetime import datetime

import pytest

from core.exceptions import BadRequest, Conflict, NotFound
from models.base import Model
from models.service import ModelService


@pytest.fixture
def fred(service, customer_class):
    return service.insert(customer_class(first_name='Fred', last_name='Flintstone', points=10))


# =====================
# 1. INTEGRATION TESTS
# =====================

@pytest.mark.integration
def test_insert_sets_generated_fields(service, customer_class):
    """
    Insert fills in id, timestamps and version.
    """
    customer = service.insert(customer_class(id=999, first_name='Barney', last_name='Rubble'))

    assert customer.id is not None
    assert customer.id != 999
    assert isinstance(customer.published, datetime)
    assert customer.published == customer.updated
    assert customer.version == 0


@pytest.mark.integration
def test_find_returns_stored_model(service, fred):
    """
    A stored row comes back as the same model.
    """
    found = service.find(fred.id)

    assert found == fred
    assert found.first_name == 'Fred'
    assert found.points == 10
    assert found.published == fred.published


@pytest.mark.integration
def test_find_all_orders_by_id(service, fred, customer_class):
    """
    Every row is returned in primary-key order.
    """
    wilma = service.insert(customer_class(first_name='Wilma', last_name='Flintstone'))

    assert [customer.id for customer in service.find_all()] == [fred.id, wilma.id]


@pytest.mark.integration
def test_update_increments_version(service, fred):
    """
    Update writes the user columns and bumps the version.
    """
    fred.points = 250

    updated = service.update(fred.id, fred)

    assert updated.points == 250
    assert updated.version == 1
    assert updated.published == fred.published
    assert updated.updated >= fred.published


@pytest.mark.integration
def test_delete_returns_removed_model(service, fred):
    """
    Delete hands back the row and removes it.
    """
    deleted = service.delete(fred.id)

    assert deleted == fred
    assert service.find_all() == []


# ====================
# 2. EDGE CASE TESTS
# ====================

@pytest.mark.edge_case
def test_unknown_id_is_not_found(service, customer_class):
    """
    find, update and delete all report missing rows.
    """
    with pytest.raises(NotFound):
        service.find(42)

    with pytest.raises(NotFound):
        service.update(42, customer_class(first_name='Nobody'))

    with pytest.raises(NotFound):
        service.delete(42)


@pytest.mark.edge_case
def test_stale_version_conflicts(service, fred):
    """
    A second update from the same stale copy is rejected.
    """
    stale = replace(fred)
    service.update(fred.id, fred)

    stale.points = 1
    with pytest.raises(Conflict) as exc_info:
        service.update(stale.id, stale)

    assert exc_info.value.status_code == 409
    assert service.find(fred.id).points == 10


@pytest.mark.edge_case
def test_unique_violation_is_bad_request(service, fred, customer_class):
    """
    Duplicate names violate the unique constraint.
    """
    with pytest.raises(BadRequest) as exc_info:
        service.insert(customer_class(first_name='Fred', last_name='Flintstone'))

    assert exc_info.value.status_code == 400
    assert 'UNIQUE' in str(exc_info.value)


@pytest.mark.edge_case
def test_not_null_violation_is_bad_request(service, customer_class):
    """
    Missing required columns are reported as bad requests.
    """
    with pytest.raises(BadRequest, match='NOT NULL'):
        service.insert(customer_class(last_name='Nameless'))


@pytest.mark.edge_case
def test_model_without_table_is_rejected(engine):
    """
    A service needs a table name.
    """
    with pytest.raises(ValueError, match='TABLE'):
        ModelService(engine, Model)


# =====================
# 3. REGRESSION TESTS
# =====================

@pytest.mark.regression
def test_update_copies_only_user_columns(service, fred, customer_class):
    """
    The id and audit fields of the submitted model never overwrite the row.
    """
    changes = customer_class(id=999, version=fred.version, first_name='Freddy',
                             last_name='Flintstone', points=42)

    updated = service.update(fred.id, changes)

    assert updated.id == fred.id
    assert updated.published == fred.published
    assert (updated.first_name, updated.points) == ('Freddy', 42)
    with pytest.raises(NotFound):
        service.find(999)
