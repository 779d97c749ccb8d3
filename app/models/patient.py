import enum
from datetime import date
from sqlalchemy import String, Text, Enum, Date, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.core.db import Base, TimestampMixin

class Gender(str, enum.Enum):
    male = "Male"
    female = "Female"
    other = "Other"
    prefer_not_to_say = "Prefer not to say"

class Patient(Base, TimestampMixin):
    __tablename__ = "patients"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    gender: Mapped[Gender | None] = mapped_column(
        Enum(Gender, name="gender", values_callable=lambda e: [m.value for m in e], create_constraint=True),
        default=Gender.prefer_not_to_say,
        server_default=Gender.prefer_not_to_say.value,
        nullable=True,
    )
    # either one may be NULL, not both (see ck_patients_contact_info)
    phone_number: Mapped[str | None] = mapped_column(String(20), unique=True, nullable=True)
    email: Mapped[str | None] = mapped_column(String(100), unique=True, nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    medical_history_summary: Mapped[str | None] = mapped_column(Text, nullable=True)

    appointments = relationship("Appointment", back_populates="patient", passive_deletes=True)

    __table_args__ = (
        CheckConstraint("phone_number IS NOT NULL OR email IS NOT NULL", name="contact_info"),
    )
