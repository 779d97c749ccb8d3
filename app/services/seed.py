"""Sample rows for a fresh database: three specializations, three services,
two patients, two doctors and one appointment for each patient."""
import logging
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.appointment import create_appointment
from app.crud.doctor import create_doctor
from app.crud.patient import create_patient
from app.crud.service import create_service
from app.crud.specialization import create_specialization
from app.models.specialization import Specialization

logger = logging.getLogger(__name__)

SPECIALIZATIONS = [
    {"name": "Cardiology", "description": "Deals with disorders of the heart."},
    {"name": "Dermatology", "description": "Deals with the skin, hair, and nails."},
    {"name": "General Practice", "description": "Primary care for all ages."},
]

SERVICES = [
    {"name": "General Consultation", "description": "Standard check-up with a GP.",
     "base_cost": Decimal("50.00"), "duration_minutes": 30},
    {"name": "ECG Test", "description": "Electrocardiogram test.",
     "base_cost": Decimal("120.00"), "duration_minutes": 45},
    {"name": "Skin Rash Treatment", "description": "Consultation and treatment for skin rashes.",
     "base_cost": Decimal("75.00"), "duration_minutes": 30},
]

PATIENTS = [
    {"first_name": "John", "last_name": "Doe", "date_of_birth": date(1985, 6, 15),
     "phone_number": "555-0101", "email": "john.doe@email.com"},
    {"first_name": "Jane", "last_name": "Smith", "date_of_birth": date(1992, 11, 23),
     "phone_number": "555-0102", "email": "jane.smith@email.com"},
]

# (doctor fields, specialization name)
DOCTORS = [
    ({"first_name": "Alice", "last_name": "Brown", "email": "alice.brown@clinic.com",
      "license_number": "GP12345"}, "General Practice"),
    ({"first_name": "Bob", "last_name": "Green", "email": "bob.green@clinic.com",
      "license_number": "CARD54321"}, "Cardiology"),
]

# (patient email, doctor email, service name, when, reason)
APPOINTMENTS = [
    ("john.doe@email.com", "alice.brown@clinic.com", "General Consultation",
     datetime(2024, 8, 15, 10, 0), "Annual check-up"),
    ("jane.smith@email.com", "bob.green@clinic.com", "ECG Test",
     datetime(2024, 8, 16, 14, 30), "Heart palpitation concerns"),
]


async def seed_sample_data(db: AsyncSession) -> dict[str, int]:
    """Insert the sample rows. Expects empty tables; a second run fails on the unique names."""
    specs = {}
    for data in SPECIALIZATIONS:
        specs[data["name"]] = await create_specialization(db, data)

    services = {}
    for data in SERVICES:
        services[data["name"]] = await create_service(db, data)

    patients = {}
    for data in PATIENTS:
        patients[data["email"]] = await create_patient(db, data)

    doctors = {}
    for data, spec_name in DOCTORS:
        doctors[data["email"]] = await create_doctor(db, {**data, "specialization_id": specs[spec_name].id})

    appointments = 0
    for patient_email, doctor_email, service_name, when, reason in APPOINTMENTS:
        await create_appointment(db, {
            "patient_id": patients[patient_email].id,
            "doctor_id": doctors[doctor_email].id,
            "service_id": services[service_name].id,
            "appointment_datetime": when,
            "reason_for_visit": reason,
        })
        appointments += 1

    counts = {
        "specializations": len(specs),
        "services": len(services),
        "patients": len(patients),
        "doctors": len(doctors),
        "appointments": appointments,
    }
    logger.info("Seeded sample data: %s", counts)
    return counts


async def is_seeded(db: AsyncSession) -> bool:
    names = [s["name"] for s in SPECIALIZATIONS]
    res = await db.execute(select(Specialization.id).where(Specialization.name.in_(names)).limit(1))
    return res.scalar_one_or_none() is not None
