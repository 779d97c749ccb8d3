from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from sqlalchemy import func, select, update

from app.core.db import utcnow
from app.core.errors import (
    CheckConstraintViolation,
    ForeignKeyViolation,
    RecordNotFound,
    RequiredFieldMissing,
    UniquenessViolation,
)
from app.crud.appointment import (
    create_appointment,
    delete_appointment,
    get_appointment,
    list_appointments,
    update_appointment,
)
from app.crud.doctor import create_doctor, delete_doctor, get_doctor, list_doctors, update_doctor
from app.crud.patient import create_patient, delete_patient, find_patient_by_contact, get_patient, update_patient
from app.crud.service import create_service, delete_service, update_service
from app.crud.specialization import create_specialization, delete_specialization, get_specialization
from app.models import Appointment, AppointmentStatus, Doctor, Gender, Patient, Service


def _patient(**extra):
    data = {"first_name": "Jane", "last_name": "Smith", "date_of_birth": date(1992, 11, 23)}
    data.update(extra)
    return data


async def _book(db, clinic, when, **extra):
    return await create_appointment(db, {
        "patient_id": clinic.patient_id,
        "doctor_id": clinic.doctor_id,
        "service_id": clinic.service_id,
        "appointment_datetime": when,
        **extra,
    })


async def _count(db, model):
    return (await db.execute(select(func.count()).select_from(model))).scalar_one()


# ---------- defaults & lifecycle ----------

async def test_defaults_are_applied(db, clinic, slot):
    patient = await create_patient(db, _patient(email="jane@email.com"))
    assert patient.gender == Gender.prefer_not_to_say
    assert patient.created_at is not None and patient.updated_at is not None

    ap = await _book(db, clinic, slot)
    assert ap.status == AppointmentStatus.scheduled
    assert ap.duration_minutes == 30

    doc = await create_doctor(db, {"first_name": "Ann", "last_name": "Lee", "email": "ann@clinic.com"})
    assert doc.years_of_experience == 0
    assert doc.specialization_id is None


async def test_updated_at_refreshes_on_update(db, clinic):
    stale = datetime(2000, 1, 1)
    await db.execute(update(Patient).where(Patient.id == clinic.patient_id).values(updated_at=stale))
    await db.commit()

    changed = await update_patient(db, clinic.patient_id, {"address": "12 Main St"})
    assert changed.address == "12 Main St"
    assert changed.updated_at > stale
    assert changed.created_at <= changed.updated_at


def test_timestamps_are_naive_utc():
    now = utcnow()
    assert now.tzinfo is None
    assert abs(now - datetime.now(timezone.utc).replace(tzinfo=None)) < timedelta(seconds=5)


# ---------- patients ----------

async def test_patient_without_any_contact_is_rejected(db):
    with pytest.raises(CheckConstraintViolation) as exc:
        await create_patient(db, _patient())
    assert "contact_info" in (exc.value.constraint or exc.value.message)
    assert await _count(db, Patient) == 0


async def test_patient_with_only_phone_or_only_email_is_accepted(db):
    await create_patient(db, _patient(phone_number="555-0199"))
    await create_patient(db, _patient(email="only.email@email.com"))
    assert await _count(db, Patient) == 2


async def test_clearing_both_contacts_on_update_is_rejected(db, clinic):
    with pytest.raises(CheckConstraintViolation):
        await update_patient(db, clinic.patient_id, {"phone_number": None, "email": None})

    fresh = await get_patient(db, clinic.patient_id)
    assert fresh.phone_number == "555-0101"
    assert fresh.email == "john.doe@email.com"


async def test_patient_phone_and_email_are_unique(db, clinic):
    with pytest.raises(UniquenessViolation):
        await create_patient(db, _patient(phone_number="555-0101"))
    with pytest.raises(UniquenessViolation):
        await create_patient(db, _patient(email="john.doe@email.com"))


async def test_patient_required_fields(db):
    data = _patient(email="nobody@email.com")
    del data["date_of_birth"]
    with pytest.raises(RequiredFieldMissing):
        await create_patient(db, data)


async def test_find_patient_by_contact(db, clinic):
    assert (await find_patient_by_contact(db, "555-0101")).id == clinic.patient_id
    assert (await find_patient_by_contact(db, "john.doe@email.com")).id == clinic.patient_id
    assert await find_patient_by_contact(db, "555-9999") is None


async def test_find_patient_by_contact_prefers_the_matching_column(db, clinic):
    # a phone number is free text, so it can look exactly like someone else's email
    odd = await create_patient(db, _patient(phone_number="john.doe@email.com"))
    odd_id = odd.id

    assert (await find_patient_by_contact(db, "john.doe@email.com")).id == clinic.patient_id

    await update_patient(db, clinic.patient_id, {"email": "john.d@email.com"})
    assert (await find_patient_by_contact(db, "john.doe@email.com")).id == odd_id


# ---------- services ----------

async def test_service_checks(db):
    with pytest.raises(CheckConstraintViolation):
        await create_service(db, {"name": "Free money", "base_cost": Decimal("-1.00")})
    with pytest.raises(CheckConstraintViolation):
        await create_service(db, {"name": "Instant", "base_cost": Decimal("10.00"), "duration_minutes": 0})

    free = await create_service(db, {"name": "Triage", "base_cost": Decimal("0.00")})
    assert free.duration_minutes == 30
    assert await _count(db, Service) == 1


async def test_service_update_respects_checks(db, clinic):
    with pytest.raises(CheckConstraintViolation):
        await update_service(db, clinic.service_id, {"base_cost": Decimal("-5")})


async def test_service_name_is_unique(db, clinic):
    with pytest.raises(UniquenessViolation):
        await create_service(db, {"name": "ECG Test", "base_cost": Decimal("1.00")})


# ---------- doctors ----------

async def test_doctor_unique_columns(db, clinic):
    base = {"first_name": "Other", "last_name": "Doc"}
    with pytest.raises(UniquenessViolation):
        await create_doctor(db, {**base, "email": "bob.green@clinic.com"})
    with pytest.raises(UniquenessViolation):
        await create_doctor(db, {**base, "email": "x@clinic.com", "license_number": "CARD54321"})

    await create_doctor(db, {**base, "email": "y@clinic.com", "phone_number": "555-0300"})
    with pytest.raises(UniquenessViolation):
        await create_doctor(db, {**base, "email": "z@clinic.com", "phone_number": "555-0300"})


async def test_doctor_email_is_required(db):
    with pytest.raises(RequiredFieldMissing):
        await create_doctor(db, {"first_name": "No", "last_name": "Mail"})


async def test_doctor_negative_experience_is_rejected(db, clinic):
    with pytest.raises(CheckConstraintViolation):
        await update_doctor(db, clinic.doctor_id, {"years_of_experience": -1})
    assert (await get_doctor(db, clinic.doctor_id)).years_of_experience == 0


async def test_doctor_with_unknown_specialization_is_rejected(db):
    with pytest.raises(ForeignKeyViolation):
        await create_doctor(db, {"first_name": "A", "last_name": "B", "email": "ab@clinic.com", "specialization_id": 999})


async def test_list_doctors_by_specialization(db, clinic):
    await create_doctor(db, {"first_name": "No", "last_name": "Spec", "email": "nospec@clinic.com"})
    docs = await list_doctors(db, specialization_id=clinic.specialization_id)
    assert [d.id for d in docs] == [clinic.doctor_id]
    assert len(await list_doctors(db)) == 2


# ---------- appointments ----------

async def test_same_doctor_same_instant_is_rejected(db, clinic, slot):
    await _book(db, clinic, slot)
    other = await create_patient(db, _patient(email="second@email.com"))
    with pytest.raises(UniquenessViolation):
        await create_appointment(db, {
            "patient_id": other.id,
            "doctor_id": clinic.doctor_id,
            "appointment_datetime": slot,
        })
    assert await _count(db, Appointment) == 1


async def test_second_session_cannot_double_book(session_factory, clinic, slot):
    async with session_factory() as first, session_factory() as second:
        await _book(first, clinic, slot)
        with pytest.raises(UniquenessViolation):
            await _book(second, clinic, slot)


async def test_overlapping_but_distinct_times_are_accepted(db, clinic, slot):
    await _book(db, clinic, slot, duration_minutes=60)
    await _book(db, clinic, slot + timedelta(minutes=15))
    assert await _count(db, Appointment) == 2


async def test_appointment_requires_existing_parents(db, clinic, slot):
    with pytest.raises(ForeignKeyViolation):
        await create_appointment(db, {"patient_id": 999, "doctor_id": clinic.doctor_id, "appointment_datetime": slot})
    with pytest.raises(ForeignKeyViolation):
        await create_appointment(db, {"patient_id": clinic.patient_id, "doctor_id": 999, "appointment_datetime": slot})
    with pytest.raises(RequiredFieldMissing):
        await create_appointment(db, {"patient_id": clinic.patient_id, "doctor_id": clinic.doctor_id})


async def test_appointment_duration_must_be_positive(db, clinic, slot):
    with pytest.raises(CheckConstraintViolation):
        await _book(db, clinic, slot, duration_minutes=0)


async def test_status_can_move_between_any_states(db, clinic, slot):
    ap = await _book(db, clinic, slot)
    ap = await update_appointment(db, ap.id, {"status": AppointmentStatus.completed})
    assert ap.status == AppointmentStatus.completed
    ap = await update_appointment(db, ap.id, {"status": AppointmentStatus.scheduled})
    assert ap.status == AppointmentStatus.scheduled


async def test_list_appointments_filters(db, clinic, slot):
    first = await _book(db, clinic, slot)
    second = await _book(db, clinic, slot + timedelta(days=1), status=AppointmentStatus.no_show)

    assert [a.id for a in await list_appointments(db)] == [first.id, second.id]
    assert [a.id for a in await list_appointments(db, status=AppointmentStatus.no_show)] == [second.id]
    assert [a.id for a in await list_appointments(db, date_to=slot + timedelta(hours=1))] == [first.id]
    assert [a.id for a in await list_appointments(db, date_from=slot + timedelta(hours=1))] == [second.id]
    assert await list_appointments(db, patient_id=999) == []


# ---------- deletion policies ----------

async def test_deleting_patient_cascades_to_appointments(db, clinic, slot):
    await _book(db, clinic, slot)
    await _book(db, clinic, slot + timedelta(hours=1))

    await delete_patient(db, clinic.patient_id)

    assert await _count(db, Appointment) == 0
    with pytest.raises(RecordNotFound):
        await get_patient(db, clinic.patient_id)


async def test_deleting_doctor_with_appointments_is_restricted(db, clinic, slot):
    ap_id = (await _book(db, clinic, slot)).id

    with pytest.raises(ForeignKeyViolation):
        await delete_doctor(db, clinic.doctor_id)

    assert (await get_doctor(db, clinic.doctor_id)).email == "bob.green@clinic.com"
    kept = await get_appointment(db, ap_id)
    assert kept.doctor_id == clinic.doctor_id
    assert kept.appointment_datetime == slot


async def test_deleting_doctor_without_appointments_succeeds(db, clinic, slot):
    ap = await _book(db, clinic, slot)
    await delete_appointment(db, ap.id)
    await delete_doctor(db, clinic.doctor_id)
    assert await _count(db, Doctor) == 0


async def test_deleting_specialization_nulls_doctor_reference(db, clinic):
    await delete_specialization(db, clinic.specialization_id)

    fresh = await get_doctor(db, clinic.doctor_id)
    assert fresh.specialization_id is None
    assert fresh.email == "bob.green@clinic.com"
    assert fresh.license_number == "CARD54321"
    with pytest.raises(RecordNotFound):
        await get_specialization(db, clinic.specialization_id)


async def test_deleting_service_nulls_appointment_reference(db, clinic, slot):
    ap = await _book(db, clinic, slot, reason_for_visit="Palpitations")
    await delete_service(db, clinic.service_id)

    fresh = await get_appointment(db, ap.id)
    assert fresh.service_id is None
    assert fresh.reason_for_visit == "Palpitations"
    assert fresh.patient_id == clinic.patient_id


async def test_missing_rows_raise_not_found(db):
    with pytest.raises(RecordNotFound):
        await delete_patient(db, 42)
    with pytest.raises(RecordNotFound):
        await update_doctor(db, 42, {"first_name": "X"})


async def test_specialization_name_unique(db, clinic):
    with pytest.raises(UniquenessViolation):
        await create_specialization(db, {"name": "Cardiology"})
