from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from app.models.appointment import AppointmentStatus

class AppointmentCreate(BaseModel):
    patient_id: int
    doctor_id: int
    service_id: Optional[int] = None
    appointment_datetime: datetime = Field(..., description="Naive local datetime of the visit")
    duration_minutes: Optional[int] = Field(30, gt=0)
    status: AppointmentStatus = AppointmentStatus.scheduled
    reason_for_visit: Optional[str] = None
    notes: Optional[str] = None

class AppointmentUpdate(BaseModel):
    patient_id: Optional[int] = None
    doctor_id: Optional[int] = None
    service_id: Optional[int] = None
    appointment_datetime: Optional[datetime] = None
    duration_minutes: Optional[int] = Field(None, gt=0)
    # any status may replace any other
    status: Optional[AppointmentStatus] = None
    reason_for_visit: Optional[str] = None
    notes: Optional[str] = None

class AppointmentOut(BaseModel):
    id: int
    patient_id: int
    doctor_id: int
    service_id: Optional[int] = None
    appointment_datetime: datetime
    duration_minutes: Optional[int] = None
    status: AppointmentStatus
    reason_for_visit: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
