"""Generic single-transaction CRUD helpers shared by the entity modules.

Each write commits on its own. A rejected write is rolled back before the
translated error is raised, so the session stays usable and no partial change
survives.
"""
import logging
from collections.abc import Mapping
from typing import Any, NoReturn, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import Base
from app.core.errors import RecordNotFound, translate_db_error

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def _entity(model: type[Base]) -> str:
    return model.__name__


async def _reject(db: AsyncSession, exc: DBAPIError, action: str, model: type[Base]) -> NoReturn:
    """Roll back, then raise the translated error (or the original one if it is not a constraint failure)."""
    await db.rollback()
    err = translate_db_error(exc)
    if err is None:
        logger.error("%s %s failed: %s", action, _entity(model), exc.orig)
        raise exc
    logger.warning("%s %s rejected: %s (%s)", action, _entity(model), type(err).__name__, err.constraint)
    raise err from exc


async def _commit(db: AsyncSession, action: str, model: type[Base]) -> None:
    try:
        await db.commit()
    except DBAPIError as exc:
        await _reject(db, exc, action, model)


async def create(db: AsyncSession, model: type[ModelT], data: Mapping[str, Any]) -> ModelT:
    obj = model(**data)
    db.add(obj)
    await _commit(db, "create", model)
    await db.refresh(obj)
    logger.info("Created %s id=%s", _entity(model), obj.id)
    return obj


async def get(db: AsyncSession, model: type[ModelT], id: int) -> ModelT:
    obj = await db.get(model, id, populate_existing=True)
    if obj is None:
        raise RecordNotFound(_entity(model), id)
    return obj


async def list_rows(db: AsyncSession, stmt, limit: int = 50, offset: int = 0) -> list:
    # rows changed by ON DELETE actions may still sit in the identity map
    res = await db.execute(stmt.offset(offset).limit(limit).execution_options(populate_existing=True))
    return list(res.scalars().all())


async def list_all(db: AsyncSession, model: type[ModelT], limit: int = 50, offset: int = 0) -> list[ModelT]:
    return await list_rows(db, select(model).order_by(model.id), limit, offset)


async def update(db: AsyncSession, model: type[ModelT], id: int, changes: Mapping[str, Any]) -> ModelT:
    obj = await get(db, model, id)
    for k, v in changes.items():
        setattr(obj, k, v)
    await _commit(db, "update", model)
    await db.refresh(obj)
    logger.info("Updated %s id=%s fields=%s", _entity(model), id, sorted(changes))
    return obj


async def remove(db: AsyncSession, model: type[ModelT], id: int) -> None:
    # plain DELETE so ON DELETE CASCADE / SET NULL / RESTRICT are decided by the database
    try:
        res = await db.execute(delete(model).where(model.id == id))
    except DBAPIError as exc:
        await _reject(db, exc, "delete", model)
    if res.rowcount == 0:
        await db.rollback()
        raise RecordNotFound(_entity(model), id)
    await _commit(db, "delete", model)
    logger.info("Deleted %s id=%s", _entity(model), id)
