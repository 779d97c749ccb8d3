import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.errors import install_error_handlers
from app.api.v1.specialization import router as specialization_router
from app.api.v1.service import router as service_router
from app.api.v1.patient import router as patient_router
from app.api.v1.doctor import router as doctor_router
from app.api.v1.appointment import router as appointment_router
from app.core.config import settings
from app.core.db import engine
from app.core.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    logger.info("%s starting", settings.APP_NAME)
    yield
    await engine.dispose()


app = FastAPI(title=settings.APP_NAME, version="0.1.0", lifespan=lifespan)
install_error_handlers(app)

app.include_router(specialization_router)
app.include_router(service_router)
app.include_router(patient_router)
app.include_router(doctor_router)
app.include_router(appointment_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
