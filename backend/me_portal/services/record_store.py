"""
Record Store - generic create/find access to the portal's tables

Route handlers only ever list a whole table, look up one row by a unique
column, or insert a validated record. Every list view re-reads the table;
there is no cache in front of the database.
"""

from typing import Any, Dict, Iterable, List, NoReturn, Optional, Type, TypeVar

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from me_portal.core.database import Base, get_db
from me_portal.core.exceptions import UpstreamError
from me_portal.core.logging_config import logger

ModelT = TypeVar("ModelT", bound=Base)


class RecordStore:
    """Thin wrapper over an AsyncSession that turns driver failures into UpstreamError"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _fail(self, error: SQLAlchemyError, operation: str) -> NoReturn:
        await self.db.rollback()
        logger.log_error_with_context(error, context=operation)
        raise UpstreamError(operation) from error

    async def find_many(
        self,
        model: Type[ModelT],
        *,
        include: Iterable[str] = (),
        order_by: Optional[Any] = None,
    ) -> List[ModelT]:
        """All rows of a table, with the named relationships loaded eagerly"""
        query = select(model)
        for relation in include:
            query = query.options(selectinload(getattr(model, relation)))
        query = query.order_by(order_by if order_by is not None else model.id)

        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            await self._fail(e, f"list {model.__name__}")
        return list(result.scalars().all())

    async def find_unique(self, model: Type[ModelT], **where: Any) -> Optional[ModelT]:
        """Single row matching unique column values, or None"""
        query = select(model)
        for column, value in where.items():
            query = query.where(getattr(model, column) == value)

        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            await self._fail(e, f"find {model.__name__}")
        return result.scalar_one_or_none()

    async def create(self, model: Type[ModelT], data: Dict[str, Any]) -> ModelT:
        """Insert one record and return it with its generated id"""
        record = model(**data)
        self.db.add(record)
        try:
            await self.db.commit()
            await self.db.refresh(record)
        except SQLAlchemyError as e:
            await self._fail(e, f"create {model.__name__}")

        logger.info(
            f"Created {model.__name__} {record.id}",
            extra={"event_type": "record_created", "model": model.__name__, "record_id": record.id},
        )
        return record


async def get_record_store(db: AsyncSession = Depends(get_db)) -> RecordStore:
    return RecordStore(db)
