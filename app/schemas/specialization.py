from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class SpecializationCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None

class SpecializationUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None

class SpecializationOut(SpecializationCreate):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
