# portfolio/repositories/base.py
"""
Generic repository shared by every content entity.

A repository is configured by an ``EntityKind`` that names the table, the
select list (with COALESCE defaults for nullable columns), the ordering of
``get_all`` and the writable columns. All SQL is plain text with named bind
parameters; table and column names come only from the kind definitions.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterator, List, Mapping, Tuple, Type, TypeVar
import logging

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from portfolio.core.exceptions import NotFoundError, StorageError
from portfolio.core.metrics import db_errors_total
from portfolio.db.database import Database

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)


@dataclass(frozen=True)
class EntityKind:
    name: str
    table: str
    model: Type[BaseModel]
    columns: Tuple[str, ...]
    select_list: str
    order_by: str
    returning: str = "id, created_at"
    touch_updated_at: bool = False


@contextmanager
def storage_errors(table: str, operation: str, **context: Any) -> Iterator[None]:
    """Log driver failures with context and re-raise them as ``StorageError``."""
    try:
        yield
    except (SQLAlchemyError, OSError) as e:
        db_errors_total.labels(table=table, operation=operation).inc()
        logger.error(
            f"Database {operation} on {table} failed: {str(e)}",
            exc_info=True,
            extra={"extra": {"table": table, "operation": operation, **context}},
        )
        raise StorageError(operation) from e


class EntityRepository(Generic[EntityT]):
    kind: EntityKind

    def __init__(self, db: Database):
        self.db = db

    def _build(self, data: Mapping[str, Any]) -> EntityT:
        # NULLs fall back to the model defaults
        return self.kind.model(**{k: v for k, v in data.items() if v is not None})

    def _params(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        return {column: record.get(column) for column in self.kind.columns}

    async def get_all(self) -> List[EntityT]:
        sql = f"SELECT {self.kind.select_list} FROM {self.kind.table} ORDER BY {self.kind.order_by}"
        with storage_errors(self.kind.table, "get_all"):
            rows = await self.db.fetch_all(sql)
        return [self._build(row) for row in rows]

    async def get_by_id(self, entity_id: int) -> EntityT:
        sql = f"SELECT {self.kind.select_list} FROM {self.kind.table} WHERE id = :id"
        with storage_errors(self.kind.table, "get_by_id", id=entity_id):
            row = await self.db.fetch_one(sql, {"id": entity_id})
        if row is None:
            raise NotFoundError(self.kind.name, entity_id)
        return self._build(row)

    async def create(self, record: Mapping[str, Any]) -> EntityT:
        params = self._params(record)
        columns = ", ".join(self.kind.columns)
        placeholders = ", ".join(f":{column}" for column in self.kind.columns)
        sql = (
            f"INSERT INTO {self.kind.table} ({columns}) VALUES ({placeholders}) "
            f"RETURNING {self.kind.returning}"
        )
        with storage_errors(self.kind.table, "create"):
            generated = await self.db.fetch_one(sql, params)

        entity = self._build({**params, **(generated or {})})
        logger.info(f"Created {self.kind.name} {entity.id}")
        return entity

    async def update(self, entity_id: int, record: Mapping[str, Any]) -> None:
        """Replace every mutable field. Updating a missing id is a no-op."""
        assignments = [f"{column} = :{column}" for column in self.kind.columns]
        if self.kind.touch_updated_at:
            assignments.append("updated_at = CURRENT_TIMESTAMP")
        sql = f"UPDATE {self.kind.table} SET {', '.join(assignments)} WHERE id = :id"

        with storage_errors(self.kind.table, "update", id=entity_id):
            affected = await self.db.execute(sql, {**self._params(record), "id": entity_id})

        if affected == 0:
            logger.info(f"Update of {self.kind.name} {entity_id} matched no rows")

    async def delete(self, entity_id: int) -> None:
        """Delete by id. Deleting a missing id is a no-op."""
        sql = f"DELETE FROM {self.kind.table} WHERE id = :id"
        with storage_errors(self.kind.table, "delete", id=entity_id):
            affected = await self.db.execute(sql, {"id": entity_id})

        if affected:
            logger.info(f"Deleted {self.kind.name} {entity_id}")
