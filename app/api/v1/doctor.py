from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.crud import doctor as crud
from app.schemas.doctor import DoctorCreate, DoctorUpdate, DoctorOut

router = APIRouter(prefix="/doctors", tags=["doctors"])

# ---------- create ----------
@router.post("/", response_model=DoctorOut, status_code=201)
async def create_doctor(payload: DoctorCreate, db: AsyncSession = Depends(get_db)):
    return await crud.create_doctor(db, payload.model_dump())

# --------- list ----------
@router.get("/", response_model=list[DoctorOut])
async def list_doctors(
    specialization_id: int | None = Query(None),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_doctors(db, specialization_id=specialization_id, limit=limit, offset=offset)

# ---------- read ----------
@router.get("/{id}", response_model=DoctorOut)
async def get_doctor(id: int, db: AsyncSession = Depends(get_db)):
    return await crud.get_doctor(db, id)

# ---------- update ----------
@router.patch("/{id}", response_model=DoctorOut)
async def update_doctor(id: int, patch: DoctorUpdate, db: AsyncSession = Depends(get_db)):
    return await crud.update_doctor(db, id, patch.model_dump(exclude_unset=True))

# ---------- delete ----------
# 409 while the doctor still has appointments (ON DELETE RESTRICT)
@router.delete("/{id}", status_code=204)
async def delete_doctor(id: int, db: AsyncSession = Depends(get_db)):
    await crud.delete_doctor(db, id)
