from collections.abc import Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import base
from app.models.specialization import Specialization


async def create_specialization(db: AsyncSession, data: Mapping[str, Any]) -> Specialization:
    return await base.create(db, Specialization, data)

async def get_specialization(db: AsyncSession, id: int) -> Specialization:
    return await base.get(db, Specialization, id)

async def list_specializations(db: AsyncSession, limit: int = 50, offset: int = 0) -> list[Specialization]:
    return await base.list_all(db, Specialization, limit, offset)

async def update_specialization(db: AsyncSession, id: int, changes: Mapping[str, Any]) -> Specialization:
    return await base.update(db, Specialization, id, changes)

async def delete_specialization(db: AsyncSession, id: int) -> None:
    """Doctors of this specialization keep their rows with specialization_id = NULL."""
    await base.remove(db, Specialization, id)
