from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from datetime import datetime

from app.core.db import get_db
from app.crud import appointment as crud
from app.models.appointment import AppointmentStatus
from app.schemas.appointment import AppointmentCreate, AppointmentUpdate, AppointmentOut

router = APIRouter(prefix="/appointments", tags=["appointments"])

# ---------- create ----------
@router.post("/", response_model=AppointmentOut, status_code=201)
async def create_appointment(payload: AppointmentCreate, db: AsyncSession = Depends(get_db)):
    # same doctor + same appointment_datetime -> 409 from uq_appointments_doctor_time
    return await crud.create_appointment(db, payload.model_dump())

# ---------- list ----------
@router.get("/", response_model=list[AppointmentOut])
async def list_appointments(
    patient_id: int | None = Query(None),
    doctor_id: int | None = Query(None),
    service_id: int | None = Query(None),
    status: AppointmentStatus | None = Query(None),
    date_from: datetime | None = Query(None),
    date_to:   datetime | None = Query(None),
    limit:     int = Query(50, ge=1, le=200),
    offset:    int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_appointments(
        db,
        patient_id=patient_id,
        doctor_id=doctor_id,
        service_id=service_id,
        status=status,
        date_from=date_from,
        date_to=date_to,
        limit=limit,
        offset=offset,
    )

# ---------- get ----------
@router.get("/{id}", response_model=AppointmentOut)
async def get_appointment(id: int, db: AsyncSession = Depends(get_db)):
    return await crud.get_appointment(db, id)

# ---------- update ----------
@router.patch("/{id}", response_model=AppointmentOut)
async def update_appointment(id: int, patch: AppointmentUpdate, db: AsyncSession = Depends(get_db)):
    return await crud.update_appointment(db, id, patch.model_dump(exclude_unset=True))

# ---------- delete ----------
@router.delete("/{id}", status_code=204)
async def delete_appointment(id: int, db: AsyncSession = Depends(get_db)):
    await crud.delete_appointment(db, id)
