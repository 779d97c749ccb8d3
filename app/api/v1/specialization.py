from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.crud import specialization as crud
from app.schemas.specialization import SpecializationCreate, SpecializationUpdate, SpecializationOut

router = APIRouter(prefix="/specializations", tags=["specializations"])

# ---------- create ----------
@router.post("/", response_model=SpecializationOut, status_code=201)
async def create_specialization(payload: SpecializationCreate, db: AsyncSession = Depends(get_db)):
    return await crud.create_specialization(db, payload.model_dump())

# ---------- list ----------
@router.get("/", response_model=list[SpecializationOut])
async def list_specializations(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_specializations(db, limit=limit, offset=offset)

# ---------- read ----------
@router.get("/{id}", response_model=SpecializationOut)
async def get_specialization(id: int, db: AsyncSession = Depends(get_db)):
    return await crud.get_specialization(db, id)

# ---------- update ----------
@router.patch("/{id}", response_model=SpecializationOut)
async def update_specialization(id: int, patch: SpecializationUpdate, db: AsyncSession = Depends(get_db)):
    return await crud.update_specialization(db, id, patch.model_dump(exclude_unset=True))

# ---------- delete ----------
@router.delete("/{id}", status_code=204)
async def delete_specialization(id: int, db: AsyncSession = Depends(get_db)):
    await crud.delete_specialization(db, id)
