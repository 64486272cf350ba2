"""
===========================================================
CRUD service for Model entities.
===========================================================

ModelService stores and retrieves one Model subclass through the statement
builders, executing each built statement on a SQLAlchemy engine.

Behaviour:
    - insert() stamps published/updated, starts version at 0 and fills in
      the generated id
    - update() is guarded by optimistic locking: the stored version must
      match the model's version, and is incremented on success
    - find(), update() and delete() raise NotFound for unknown ids
    - database failures are translated by handle_persistence_error()

Example:
    >>> from models.service import ModelService
    >>> from utils.database_utils import create_sqlalchemy_engine
    >>>
    >>> service = ModelService(create_sqlalchemy_engine(), Customer)
    >>> fred = service.insert(Customer(first_name='Fred'))
    >>> fred.first_name = 'Frederick'
    >>> service.update(fred.id, fred)
"""

import logging
from datetime import datetime
from typing import Any, List, Optional, Type

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from core.exceptions import Conflict, NotFound
from models.base import ID_COLUMN, UPDATED_COLUMN, VERSION_COLUMN, Model
from sqlbuilder import DeleteBuilder, InsertBuilder, SelectBuilder, SqlOperator, UpdateBuilder
from utils.database_utils import execute_statement, handle_persistence_error, paramstyle_for

logger = logging.getLogger(__name__)


class ModelService:
    """Persistent storage for one Model subclass.

    Attributes:
        engine: SQLAlchemy engine statements are executed on
        model_class: Model subclass handled by this service
        table: Table name taken from ``model_class.TABLE``
        paramstyle: Placeholder style matching the engine's driver
    """

    model_class: Type[Model] = Model

    def __init__(self, engine: Engine, model_class: Optional[Type[Model]] = None):
        """Bind the service to an engine and model class.

        Args:
            engine: SQLAlchemy engine
            model_class: Model subclass (defaults to the class attribute)

        Raises:
            ValueError: If the model class does not declare a TABLE
        """
        if model_class is not None:
            self.model_class = model_class
        if not self.model_class.TABLE:
            raise ValueError(f"{self.model_class.__name__} does not declare a TABLE")

        self.engine = engine
        self.table = self.model_class.TABLE
        self.paramstyle = paramstyle_for(engine)

    def find(self, id: Any) -> Model:
        """Return the model with the given primary key.

        Raises:
            NotFound: If no row has this id
            ApplicationError: If the database fails
        """
        statement = SelectBuilder(self.table).primary(ID_COLUMN, id).build(self.paramstyle)
        try:
            with self.engine.connect() as conn:
                row = execute_statement(conn, statement).mappings().first()
        except SQLAlchemyError as e:
            handle_persistence_error(e)

        if row is None:
            raise NotFound(f"{self.table}: id={id}")
        return self.model_class.from_row(row)

    def find_all(self) -> List[Model]:
        """Return every model, ordered by primary key."""
        statement = SelectBuilder(self.table).all().order_by(ID_COLUMN).build(self.paramstyle)
        try:
            with self.engine.connect() as conn:
                rows = execute_statement(conn, statement).mappings().all()
        except SQLAlchemyError as e:
            handle_persistence_error(e)

        return [self.model_class.from_row(row) for row in rows]

    def insert(self, model: Model) -> Model:
        """Insert ``model`` and return it with id, timestamps and version set.

        Any id already on the model is ignored.

        Raises:
            BadRequest: If a constraint is violated
            InternalServerError: If the database fails otherwise
        """
        now = datetime.now()
        model.id = None
        model.published = now
        model.updated = now
        model.version = 0

        builder = InsertBuilder(self.table).pair_model(model).pair(VERSION_COLUMN, model.version)
        for column, value in model.to_pairs().items():
            builder.pair(column, value)

        # sqlite3 reports lastrowid on every SQLite version; other drivers need RETURNING
        use_returning = self.engine.dialect.insert_returning and self.engine.dialect.name != 'sqlite'
        if use_returning:
            builder.returning()
        statement = builder.build(self.paramstyle)

        try:
            with self.engine.begin() as conn:
                result = execute_statement(conn, statement)
                model.id = result.scalar_one() if use_returning else result.lastrowid
        except SQLAlchemyError as e:
            handle_persistence_error(e)

        logger.info(f"Inserted {self.table} id={model.id}")
        return model

    def update(self, id: Any, model: Model) -> Model:
        """Update the row ``id`` from ``model`` and return the stored result.

        Raises:
            NotFound: If no row has this id
            Conflict: If the row was changed since ``model.version`` was read
            BadRequest: If a constraint is violated
        """
        stored = self.find(id)
        stored.copy_from(model)

        builder = UpdateBuilder(self.table)
        for column, value in stored.to_pairs().items():
            builder.pair(column, value)
        builder.pair(UPDATED_COLUMN, datetime.now())
        builder.pair_literal(VERSION_COLUMN, f"{VERSION_COLUMN} + 1")
        builder.expression(ID_COLUMN, SqlOperator.EQ, id)
        builder.expression(VERSION_COLUMN, SqlOperator.EQ, model.version)
        statement = builder.build(self.paramstyle)

        try:
            with self.engine.begin() as conn:
                result = execute_statement(conn, statement)
                matched = result.rowcount
        except SQLAlchemyError as e:
            handle_persistence_error(e)

        if matched == 0:
            raise Conflict(f"{self.table}: id={id} was modified since version {model.version}")

        logger.info(f"Updated {self.table} id={id}")
        return self.find(id)

    def delete(self, id: Any) -> Model:
        """Delete the row ``id`` and return the model as it was stored.

        Raises:
            NotFound: If no row has this id
        """
        model = self.find(id)
        statement = DeleteBuilder(self.table).model(model).build(self.paramstyle)

        try:
            with self.engine.begin() as conn:
                execute_statement(conn, statement)
        except SQLAlchemyError as e:
            handle_persistence_error(e)

        logger.info(f"Deleted {self.table} id={id}")
        return model
