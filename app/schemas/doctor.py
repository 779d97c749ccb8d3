from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime

class DoctorCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    phone_number: Optional[str] = Field(None, max_length=20)
    specialization_id: Optional[int] = None
    license_number: Optional[str] = Field(None, max_length=50)
    years_of_experience: Optional[int] = Field(0, ge=0)

class DoctorUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(None, min_length=1, max_length=50)
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = Field(None, max_length=20)
    specialization_id: Optional[int] = None
    license_number: Optional[str] = Field(None, max_length=50)
    years_of_experience: Optional[int] = Field(None, ge=0)

class DoctorOut(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: str
    phone_number: Optional[str] = None
    specialization_id: Optional[int] = None
    license_number: Optional[str] = None
    years_of_experience: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
