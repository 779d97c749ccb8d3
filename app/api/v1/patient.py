from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.crud import patient as crud
from app.schemas.patient import PatientCreate, PatientUpdate, PatientOut

router = APIRouter(prefix="/patients", tags=["patients"])

@router.post("/", response_model=PatientOut, status_code=201)
async def create_patient(payload: PatientCreate, db: AsyncSession = Depends(get_db)):
    return await crud.create_patient(db, payload.model_dump())

@router.get("/", response_model=list[PatientOut])
async def list_patients(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_patients(db, limit=limit, offset=offset)

# by phone number or email
@router.get("/lookup", response_model=PatientOut)
async def lookup_patient(contact: str = Query(..., min_length=1), db: AsyncSession = Depends(get_db)):
    pt = await crud.find_patient_by_contact(db, contact)
    if not pt:
        raise HTTPException(status_code=404, detail="Patient not found")
    return pt

@router.get("/{id}", response_model=PatientOut)
async def get_patient(id: int, db: AsyncSession = Depends(get_db)):
    return await crud.get_patient(db, id)

@router.patch("/{id}", response_model=PatientOut)
async def update_patient(id: int, patch: PatientUpdate, db: AsyncSession = Depends(get_db)):
    return await crud.update_patient(db, id, patch.model_dump(exclude_unset=True))

# ---------- delete (cascades to appointments) ----------
@router.delete("/{id}", status_code=204)
async def delete_patient(id: int, db: AsyncSession = Depends(get_db)):
    await crud.delete_patient(db, id)
