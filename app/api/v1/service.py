from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.crud import service as crud
from app.schemas.service import ServiceCreate, ServiceUpdate, ServiceOut

router = APIRouter(prefix="/services", tags=["services"])

@router.post("/", response_model=ServiceOut, status_code=201)
async def create_service(payload: ServiceCreate, db: AsyncSession = Depends(get_db)):
    return await crud.create_service(db, payload.model_dump())

@router.get("/", response_model=list[ServiceOut])
async def list_services(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_services(db, limit=limit, offset=offset)

@router.get("/{id}", response_model=ServiceOut)
async def get_service(id: int, db: AsyncSession = Depends(get_db)):
    return await crud.get_service(db, id)

@router.patch("/{id}", response_model=ServiceOut)
async def update_service(id: int, patch: ServiceUpdate, db: AsyncSession = Depends(get_db)):
    return await crud.update_service(db, id, patch.model_dump(exclude_unset=True))

# appointments for this service keep existing with service_id = null
@router.delete("/{id}", status_code=204)
async def delete_service(id: int, db: AsyncSession = Depends(get_db)):
    await crud.delete_service(db, id)
