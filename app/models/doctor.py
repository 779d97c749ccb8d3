from sqlalchemy import String, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.core.db import Base, TimestampMixin

class Doctor(Base, TimestampMixin):
    __tablename__ = "doctors"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    phone_number: Mapped[str | None] = mapped_column(String(20), unique=True, nullable=True)

    specialization_id: Mapped[int | None] = mapped_column(
        ForeignKey("specializations.id", ondelete="SET NULL", onupdate="CASCADE"),
        nullable=True,
        index=True,
    )
    license_number: Mapped[str | None] = mapped_column(String(50), unique=True, nullable=True)
    years_of_experience: Mapped[int | None] = mapped_column(Integer, default=0, server_default="0", nullable=True)

    specialization = relationship("Specialization", back_populates="doctors")
    # "all": never let the ORM null out appointments.doctor_id, the database must RESTRICT
    appointments = relationship("Appointment", back_populates="doctor", passive_deletes="all")

    __table_args__ = (
        CheckConstraint("years_of_experience >= 0", name="experience_non_negative"),
    )
