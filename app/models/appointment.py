import enum
from datetime import datetime
from sqlalchemy import Text, Integer, Enum, ForeignKey, DateTime, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.db import Base, TimestampMixin

class AppointmentStatus(str, enum.Enum):
    scheduled = "Scheduled"
    completed = "Completed"
    cancelled_by_patient = "Cancelled_By_Patient"
    cancelled_by_clinic = "Cancelled_By_Clinic"
    no_show = "No_Show"

class Appointment(Base, TimestampMixin):
    __tablename__ = "appointments"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    patient_id: Mapped[int] = mapped_column(
        ForeignKey("patients.id", ondelete="CASCADE"), nullable=False, index=True
    )
    doctor_id: Mapped[int] = mapped_column(
        ForeignKey("doctors.id", ondelete="RESTRICT"), nullable=False
    )
    service_id: Mapped[int | None] = mapped_column(
        ForeignKey("services.id", ondelete="SET NULL"), nullable=True, index=True
    )

    appointment_datetime: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, index=True)
    duration_minutes: Mapped[int | None] = mapped_column(Integer, default=30, server_default="30", nullable=True)

    # no transition graph: any status can be written over any other
    status: Mapped[AppointmentStatus] = mapped_column(
        Enum(AppointmentStatus, name="appointment_status",
             values_callable=lambda e: [m.value for m in e], create_constraint=True),
        default=AppointmentStatus.scheduled,
        server_default=AppointmentStatus.scheduled.value,
        nullable=False,
        index=True,
    )
    reason_for_visit: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    patient = relationship("Patient", back_populates="appointments")
    doctor = relationship("Doctor", back_populates="appointments")
    service = relationship("Service", back_populates="appointments")

    __table_args__ = (
        # same instant only; overlapping intervals are not rejected
        UniqueConstraint("doctor_id", "appointment_datetime", name="uq_appointments_doctor_time"),
        CheckConstraint("duration_minutes > 0", name="duration_positive"),
    )
