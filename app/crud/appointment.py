from collections.abc import Mapping
from datetime import datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import base
from app.models.appointment import Appointment, AppointmentStatus


async def create_appointment(db: AsyncSession, data: Mapping[str, Any]) -> Appointment:
    # the only double-booking guard is uq_appointments_doctor_time (same instant)
    return await base.create(db, Appointment, data)

async def get_appointment(db: AsyncSession, id: int) -> Appointment:
    return await base.get(db, Appointment, id)

async def list_appointments(
    db: AsyncSession,
    patient_id: int | None = None,
    doctor_id: int | None = None,
    service_id: int | None = None,
    status: AppointmentStatus | None = None,
    date_from: datetime | None = None,
    date_to: datetime | None = None,
    limit: int = 50,
    offset: int = 0,
) -> list[Appointment]:
    q = select(Appointment)
    if patient_id is not None:
        q = q.where(Appointment.patient_id == patient_id)
    if doctor_id is not None:
        q = q.where(Appointment.doctor_id == doctor_id)
    if service_id is not None:
        q = q.where(Appointment.service_id == service_id)
    if status is not None:
        q = q.where(Appointment.status == status)
    if date_from:
        q = q.where(Appointment.appointment_datetime >= date_from)
    if date_to:
        q = q.where(Appointment.appointment_datetime < date_to)
    q = q.order_by(Appointment.appointment_datetime, Appointment.id)
    return await base.list_rows(db, q, limit, offset)

async def update_appointment(db: AsyncSession, id: int, changes: Mapping[str, Any]) -> Appointment:
    return await base.update(db, Appointment, id, changes)

async def delete_appointment(db: AsyncSession, id: int) -> None:
    await base.remove(db, Appointment, id)
