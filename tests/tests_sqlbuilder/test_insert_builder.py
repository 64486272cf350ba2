"""
========================================================
Comprehensive pytest suite for sqlbuilder InsertBuilder
========================================================

Sections:
---------
1. Unit tests - Column and value rendering
2. Edge case tests - Primary key exclusion, NULLs, empty pair lists
3. Regression tests - Repeated build() calls

How to Execute:
---------------
All tests:          pytest tests/tests_sqlbuilder/test_insert_builder.py -v
By category:        pytest tests/tests_sqlbuilder/test_insert_builder.py -m unit
"""

import pytest

from sqlbuilder import EmptyAssignmentError, InsertBuilder, MalformedConditionError

MY_TABLE = "mytable"


# ===============
# 1. UNIT TESTS
# ===============

@pytest.mark.unit
def test_insert_binds_every_value():
    """
    Plain pairs become placeholders with parameters in column order.
    """
    statement = (
        InsertBuilder(MY_TABLE)
        .pair("firstName", "Fred")
        .pair("lastName", "Flintstone")
        .pair("points", 111)
        .build()
    )

    assert statement.sql == "INSERT INTO mytable (firstName, lastName, points) VALUES (?, ?, ?)"
    assert statement.params == ["Fred", "Flintstone", 111]


@pytest.mark.unit
def test_insert_two_pairs_exact_text():
    """
    The canonical two-column insert.
    """
    sql, params = (
        InsertBuilder(MY_TABLE)
        .pair("firstName", "Fred")
        .pair("lastName", "Flintstone")
        .build()
    )

    assert sql == "INSERT INTO mytable (firstName, lastName) VALUES (?, ?)"
    assert params == ["Fred", "Flintstone"]


@pytest.mark.unit
def test_insert_with_literal():
    """
    Literal pairs are written verbatim and bind nothing.
    """
    statement = (
        InsertBuilder(MY_TABLE)
        .pair_literal("firstName", "'Wilma'")
        .pair("lastName", "Flintstone")
        .pair_literal("points", 222)
        .build()
    )

    assert statement.sql == "INSERT INTO mytable (firstName, lastName, points) VALUES ('Wilma', ?, 222)"
    assert statement.params == ["Flintstone"]


@pytest.mark.unit
def test_insert_with_model(sample_model, now):
    """
    pair_model() contributes the audit timestamps; the id stays out.
    """
    statement = (
        InsertBuilder(MY_TABLE)
        .pair_model(sample_model)
        .pair("firstName", "Barney")
        .pair("lastName", "Rubble")
        .pair("points", 333)
        .build()
    )

    assert statement.sql == (
        "INSERT INTO mytable (published, updated, firstName, lastName, points)"
        " VALUES (?, ?, ?, ?, ?)"
    )
    assert statement.params == [now, now, "Barney", "Rubble", 333]


@pytest.mark.unit
def test_insert_returning_primary_key():
    """
    returning() appends RETURNING for the named primary key.
    """
    statement = (
        InsertBuilder(MY_TABLE)
        .primary("id")
        .pair("firstName", "Fred")
        .returning()
        .build()
    )

    assert statement.sql == "INSERT INTO mytable (firstName) VALUES (?) RETURNING id"
    assert statement.params == ["Fred"]


@pytest.mark.unit
@pytest.mark.parametrize("paramstyle, expected", [
    ("qmark", "INSERT INTO mytable (a, b) VALUES (?, ?)"),
    ("numeric", "INSERT INTO mytable (a, b) VALUES (:1, :2)"),
    ("format", "INSERT INTO mytable (a, b) VALUES (%s, %s)"),
    ("pyformat", "INSERT INTO mytable (a, b) VALUES (%s, %s)"),
])
def test_insert_paramstyles(paramstyle, expected):
    """
    Placeholders follow the requested DB-API paramstyle.
    """
    statement = InsertBuilder(MY_TABLE).pair("a", 1).pair("b", 2).build(paramstyle)

    assert statement.sql == expected
    assert statement.params == [1, 2]


# ====================
# 2. EDGE CASE TESTS
# ====================

@pytest.mark.edge_case
def test_insert_skips_primary_key_column():
    """
    The column named by primary() is left to the database.
    """
    statement = (
        InsertBuilder(MY_TABLE)
        .pair("id", 99)
        .pair("firstName", "Fred")
        .pair("lastName", "Flintstone")
        .primary("id")
        .build()
    )

    assert statement.sql == "INSERT INTO mytable (firstName, lastName) VALUES (?, ?)"
    assert statement.params == ["Fred", "Flintstone"]


@pytest.mark.edge_case
def test_insert_null_value_renders_null():
    """
    None is written as NULL and is not bound.
    """
    statement = (
        InsertBuilder(MY_TABLE)
        .pair("firstName", "Pebbles")
        .pair("lastName", None)
        .build()
    )

    assert statement.sql == "INSERT INTO mytable (firstName, lastName) VALUES (?, NULL)"
    assert statement.params == ["Pebbles"]


@pytest.mark.edge_case
def test_insert_placeholders_match_params():
    """
    One placeholder per non-literal, non-null pair, in matching order.
    """
    statement = (
        InsertBuilder(MY_TABLE)
        .pair("a", 1)
        .pair_literal("b", "now()")
        .pair("c", None)
        .pair("d", "x")
        .pair_literal("e", 5)
        .pair("f", 2.5)
        .build()
    )

    assert statement.sql.count("?") == 3
    assert statement.params == [1, "x", 2.5]


@pytest.mark.edge_case
def test_insert_pair_if_not_null():
    """
    pair_if_not_null() drops None values entirely.
    """
    statement = (
        InsertBuilder(MY_TABLE)
        .pair_if_not_null("firstName", "Dino")
        .pair_if_not_null("lastName", None)
        .build()
    )

    assert statement.sql == "INSERT INTO mytable (firstName) VALUES (?)"


@pytest.mark.edge_case
def test_insert_without_pairs_fails():
    """
    Nothing to insert is a configuration error.
    """
    with pytest.raises(EmptyAssignmentError):
        InsertBuilder(MY_TABLE).build()


@pytest.mark.edge_case
def test_insert_with_only_primary_key_pair_fails():
    """
    Skipping the primary key can leave nothing to insert.
    """
    with pytest.raises(EmptyAssignmentError):
        InsertBuilder(MY_TABLE).pair("id", 1).primary("id").build()


@pytest.mark.edge_case
def test_insert_returning_without_primary_fails():
    """
    RETURNING needs to know the key column.
    """
    with pytest.raises(MalformedConditionError):
        InsertBuilder(MY_TABLE).pair("firstName", "Fred").returning().build()


@pytest.mark.edge_case
def test_insert_ignores_conditions():
    """
    Filter conditions have no place in an INSERT.
    """
    statement = (
        InsertBuilder(MY_TABLE)
        .pair("firstName", "Fred")
        .expression("points", "LT", 100)
        .build()
    )

    assert statement.sql == "INSERT INTO mytable (firstName) VALUES (?)"
    assert statement.params == ["Fred"]


@pytest.mark.edge_case
def test_insert_unsupported_paramstyle():
    """
    Named placeholders cannot be produced from a positional list.
    """
    with pytest.raises(ValueError):
        InsertBuilder(MY_TABLE).pair("a", 1).build("named")


# ====================
# 3. REGRESSION TESTS
# ====================

@pytest.mark.regression
def test_insert_build_twice_does_not_duplicate_params():
    """
    A second build() starts from an empty parameter list.
    """
    builder = InsertBuilder(MY_TABLE).pair("firstName", "Fred").pair("points", 7)

    first = builder.build()
    second = builder.build()

    assert first == second
    assert builder.params == ["Fred", 7]
    assert builder.sql == first.sql
