from pydantic import BaseModel, EmailStr, Field, model_validator
from typing import Optional
from datetime import date, datetime
from app.models.patient import Gender

class PatientCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    date_of_birth: date
    gender: Gender = Gender.prefer_not_to_say
    phone_number: Optional[str] = Field(None, max_length=20)
    email: Optional[EmailStr] = None
    address: Optional[str] = None
    medical_history_summary: Optional[str] = None

    @model_validator(mode="after")
    def _needs_contact(self):
        if self.phone_number is None and self.email is None:
            raise ValueError("phone_number or email is required")
        return self

class PatientUpdate(BaseModel):
    # clearing both contacts is left to ck_patients_contact_info
    first_name: Optional[str] = Field(None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(None, min_length=1, max_length=50)
    date_of_birth: Optional[date] = None
    gender: Optional[Gender] = None
    phone_number: Optional[str] = Field(None, max_length=20)
    email: Optional[EmailStr] = None
    address: Optional[str] = None
    medical_history_summary: Optional[str] = None

class PatientOut(BaseModel):
    id: int
    first_name: str
    last_name: str
    date_of_birth: date
    gender: Optional[Gender] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    medical_history_summary: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
