from pydantic import BaseModel, Field
from typing import Optional
from decimal import Decimal
from datetime import datetime

class ServiceCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = None
    base_cost: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    duration_minutes: Optional[int] = Field(30, gt=0)

class ServiceUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = None
    base_cost: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    duration_minutes: Optional[int] = Field(None, gt=0)

class ServiceOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    base_cost: Decimal
    duration_minutes: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
