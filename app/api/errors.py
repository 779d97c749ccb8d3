from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.errors import (
    ClinicDataError,
    CheckConstraintViolation,
    ForeignKeyViolation,
    RecordNotFound,
    RequiredFieldMissing,
    UniquenessViolation,
)

STATUS_BY_ERROR: dict[type[ClinicDataError], int] = {
    RecordNotFound: status.HTTP_404_NOT_FOUND,
    UniquenessViolation: status.HTTP_409_CONFLICT,
    ForeignKeyViolation: status.HTTP_409_CONFLICT,
    CheckConstraintViolation: status.HTTP_422_UNPROCESSABLE_ENTITY,
    RequiredFieldMissing: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


async def clinic_data_error_handler(request: Request, exc: ClinicDataError) -> JSONResponse:
    code = STATUS_BY_ERROR.get(type(exc), status.HTTP_400_BAD_REQUEST)
    return JSONResponse(
        status_code=code,
        content={"detail": exc.message, "error": type(exc).__name__, "constraint": exc.constraint},
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ClinicDataError, clinic_data_error_handler)
