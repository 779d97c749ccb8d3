from collections.abc import Mapping
from typing import Any

from sqlalchemy import case, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import base
from app.models.patient import Patient


async def create_patient(db: AsyncSession, data: Mapping[str, Any]) -> Patient:
    return await base.create(db, Patient, data)

async def get_patient(db: AsyncSession, id: int) -> Patient:
    return await base.get(db, Patient, id)

async def find_patient_by_contact(db: AsyncSession, contact: str) -> Patient | None:
    """Look a patient up by phone number or email (both are unique).

    Phone numbers are free text, so one patient's phone may equal another's
    email; the column matching the shape of ``contact`` wins in that case.
    """
    preferred = Patient.email if "@" in contact else Patient.phone_number
    q = (
        select(Patient)
        .where(or_(Patient.phone_number == contact, Patient.email == contact))
        .order_by(case((preferred == contact, 0), else_=1), Patient.id)
        .limit(1)
    )
    res = await db.execute(q)
    return res.scalars().first()

async def list_patients(db: AsyncSession, limit: int = 50, offset: int = 0) -> list[Patient]:
    return await base.list_all(db, Patient, limit, offset)

async def update_patient(db: AsyncSession, id: int, changes: Mapping[str, Any]) -> Patient:
    return await base.update(db, Patient, id, changes)

async def delete_patient(db: AsyncSession, id: int) -> None:
    """Cascades: every appointment of the patient is deleted with it."""
    await base.remove(db, Patient, id)
