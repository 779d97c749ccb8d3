from collections.abc import Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import base
from app.models.service import Service


async def create_service(db: AsyncSession, data: Mapping[str, Any]) -> Service:
    return await base.create(db, Service, data)

async def get_service(db: AsyncSession, id: int) -> Service:
    return await base.get(db, Service, id)

async def list_services(db: AsyncSession, limit: int = 50, offset: int = 0) -> list[Service]:
    return await base.list_all(db, Service, limit, offset)

async def update_service(db: AsyncSession, id: int, changes: Mapping[str, Any]) -> Service:
    return await base.update(db, Service, id, changes)

async def delete_service(db: AsyncSession, id: int) -> None:
    """Appointments booked for this service survive with service_id = NULL."""
    await base.remove(db, Service, id)
