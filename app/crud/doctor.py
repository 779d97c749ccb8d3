from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import base
from app.models.doctor import Doctor


async def create_doctor(db: AsyncSession, data: Mapping[str, Any]) -> Doctor:
    return await base.create(db, Doctor, data)

async def get_doctor(db: AsyncSession, id: int) -> Doctor:
    return await base.get(db, Doctor, id)

async def list_doctors(
    db: AsyncSession,
    specialization_id: int | None = None,
    limit: int = 50,
    offset: int = 0,
) -> list[Doctor]:
    q = select(Doctor)
    if specialization_id is not None:
        q = q.where(Doctor.specialization_id == specialization_id)
    return await base.list_rows(db, q.order_by(Doctor.id), limit, offset)

async def update_doctor(db: AsyncSession, id: int, changes: Mapping[str, Any]) -> Doctor:
    return await base.update(db, Doctor, id, changes)

async def delete_doctor(db: AsyncSession, id: int) -> None:
    """Raises ForeignKeyViolation while any appointment still references the doctor."""
    await base.remove(db, Doctor, id)
