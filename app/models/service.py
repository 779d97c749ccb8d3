from decimal import Decimal
from sqlalchemy import String, Text, Numeric, Integer, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.core.db import Base, TimestampMixin

class Service(Base, TimestampMixin):
    __tablename__ = "services"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(150), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    base_cost: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    # typical duration; the appointment keeps its own copy
    duration_minutes: Mapped[int | None] = mapped_column(Integer, default=30, server_default="30", nullable=True)

    appointments = relationship("Appointment", back_populates="service", passive_deletes=True)

    __table_args__ = (
        CheckConstraint("base_cost >= 0", name="base_cost_non_negative"),
        CheckConstraint("duration_minutes > 0", name="duration_positive"),
    )
