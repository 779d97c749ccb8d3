import os
import tempfile
from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace

# the module-level engine in app.core.db must never point at MySQL during tests
_TMP = tempfile.mkdtemp(prefix="clinic-booking-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_TMP, 'app.db')}"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.db import create_schema, get_db, make_engine
from app.crud.doctor import create_doctor
from app.crud.patient import create_patient
from app.crud.service import create_service
from app.crud.specialization import create_specialization
from app.main import app


@pytest_asyncio.fixture
async def engine(tmp_path):
    eng = make_engine(f"sqlite+aiosqlite:///{tmp_path / 'clinic.db'}")
    await create_schema(eng)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    async def _get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def clinic(db):
    """One row of each parent table; only ids are handed out (rollbacks expire instances)."""
    spec = await create_specialization(db, {"name": "Cardiology", "description": "Heart"})
    service = await create_service(db, {"name": "ECG Test", "base_cost": Decimal("120.00"), "duration_minutes": 45})
    patient = await create_patient(db, {
        "first_name": "John",
        "last_name": "Doe",
        "date_of_birth": date(1985, 6, 15),
        "phone_number": "555-0101",
        "email": "john.doe@email.com",
    })
    doctor = await create_doctor(db, {
        "first_name": "Bob",
        "last_name": "Green",
        "email": "bob.green@clinic.com",
        "specialization_id": spec.id,
        "license_number": "CARD54321",
    })
    return SimpleNamespace(
        specialization_id=spec.id,
        service_id=service.id,
        patient_id=patient.id,
        doctor_id=doctor.id,
    )


@pytest.fixture
def slot():
    return datetime(2024, 8, 16, 14, 30)
