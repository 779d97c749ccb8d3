"""initial clinic booking schema

Revision ID: 0001
Revises:
Create Date: 2025-05-08 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

GENDERS = ("Male", "Female", "Other", "Prefer not to say")
STATUSES = ("Scheduled", "Completed", "Cancelled_By_Patient", "Cancelled_By_Clinic", "No_Show")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    # check names are short; the ck_<table>_ prefix comes from the naming convention on Base.metadata
    # parents first: specializations, services, patients, doctors, appointments
    op.create_table(
        "specializations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_specializations"),
        sa.UniqueConstraint("name", name="uq_specializations_name"),
    )

    op.create_table(
        "services",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("base_cost", sa.Numeric(10, 2), nullable=False),
        sa.Column("duration_minutes", sa.Integer(), server_default="30", nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_services"),
        sa.UniqueConstraint("name", name="uq_services_name"),
        sa.CheckConstraint("base_cost >= 0", name="base_cost_non_negative"),
        sa.CheckConstraint("duration_minutes > 0", name="duration_positive"),
    )

    op.create_table(
        "patients",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(50), nullable=False),
        sa.Column("last_name", sa.String(50), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column(
            "gender",
            sa.Enum(*GENDERS, name="gender", create_constraint=True),
            server_default="Prefer not to say",
            nullable=True,
        ),
        sa.Column("phone_number", sa.String(20), nullable=True),
        sa.Column("email", sa.String(100), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("medical_history_summary", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_patients"),
        sa.UniqueConstraint("phone_number", name="uq_patients_phone_number"),
        sa.UniqueConstraint("email", name="uq_patients_email"),
        sa.CheckConstraint("phone_number IS NOT NULL OR email IS NOT NULL", name="contact_info"),
    )

    op.create_table(
        "doctors",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(50), nullable=False),
        sa.Column("last_name", sa.String(50), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("phone_number", sa.String(20), nullable=True),
        sa.Column("specialization_id", sa.Integer(), nullable=True),
        sa.Column("license_number", sa.String(50), nullable=True),
        sa.Column("years_of_experience", sa.Integer(), server_default="0", nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_doctors"),
        sa.UniqueConstraint("email", name="uq_doctors_email"),
        sa.UniqueConstraint("phone_number", name="uq_doctors_phone_number"),
        sa.UniqueConstraint("license_number", name="uq_doctors_license_number"),
        sa.ForeignKeyConstraint(
            ["specialization_id"], ["specializations.id"],
            name="fk_doctors_specialization_id_specializations",
            ondelete="SET NULL",
            onupdate="CASCADE",
        ),
        sa.CheckConstraint("years_of_experience >= 0", name="experience_non_negative"),
    )
    op.create_index("ix_doctors_specialization_id", "doctors", ["specialization_id"])

    op.create_table(
        "appointments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("patient_id", sa.Integer(), nullable=False),
        sa.Column("doctor_id", sa.Integer(), nullable=False),
        sa.Column("service_id", sa.Integer(), nullable=True),
        sa.Column("appointment_datetime", sa.DateTime(timezone=False), nullable=False),
        sa.Column("duration_minutes", sa.Integer(), server_default="30", nullable=True),
        sa.Column(
            "status",
            sa.Enum(*STATUSES, name="appointment_status", create_constraint=True),
            server_default="Scheduled",
            nullable=False,
        ),
        sa.Column("reason_for_visit", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_appointments"),
        sa.ForeignKeyConstraint(
            ["patient_id"], ["patients.id"],
            name="fk_appointments_patient_id_patients",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["doctor_id"], ["doctors.id"],
            name="fk_appointments_doctor_id_doctors",
            ondelete="RESTRICT",
        ),
        sa.ForeignKeyConstraint(
            ["service_id"], ["services.id"],
            name="fk_appointments_service_id_services",
            ondelete="SET NULL",
        ),
        sa.UniqueConstraint("doctor_id", "appointment_datetime", name="uq_appointments_doctor_time"),
        sa.CheckConstraint("duration_minutes > 0", name="duration_positive"),
    )
    op.create_index("ix_appointments_patient_id", "appointments", ["patient_id"])
    op.create_index("ix_appointments_service_id", "appointments", ["service_id"])
    op.create_index("ix_appointments_appointment_datetime", "appointments", ["appointment_datetime"])
    op.create_index("ix_appointments_status", "appointments", ["status"])

    if op.get_context().dialect.name == "mysql":
        # keep updated_at current for writes that bypass the ORM too
        for table in ("specializations", "services", "patients", "doctors", "appointments"):
            op.execute(
                f"ALTER TABLE {table} MODIFY updated_at TIMESTAMP NOT NULL "
                "DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP"
            )


def downgrade() -> None:
    # children first
    op.drop_index("ix_appointments_status", table_name="appointments")
    op.drop_index("ix_appointments_appointment_datetime", table_name="appointments")
    op.drop_index("ix_appointments_service_id", table_name="appointments")
    op.drop_index("ix_appointments_patient_id", table_name="appointments")
    op.drop_table("appointments")
    op.drop_index("ix_doctors_specialization_id", table_name="doctors")
    op.drop_table("doctors")
    op.drop_table("patients")
    op.drop_table("services")
    op.drop_table("specializations")
