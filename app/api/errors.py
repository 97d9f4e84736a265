from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.errors import (
    ArchiveConflict,
    CycleDetected,
    DirectoryError,
    EmployeeNotFound,
    IntegrityFailure,
    PolicyViolation,
    ValidationError,
)

STATUS_BY_ERROR: dict[type[DirectoryError], int] = {
    ValidationError: 422,
    PolicyViolation: status.HTTP_403_FORBIDDEN,
    EmployeeNotFound: status.HTTP_404_NOT_FOUND,
    ArchiveConflict: status.HTTP_409_CONFLICT,
    IntegrityFailure: status.HTTP_409_CONFLICT,
    CycleDetected: status.HTTP_409_CONFLICT,
}


def status_for(exc: DirectoryError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_400_BAD_REQUEST


async def directory_error_handler(request: Request, exc: DirectoryError) -> JSONResponse:
    return JSONResponse(status_code=status_for(exc), content={"detail": exc.to_dict()})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DirectoryError, directory_error_handler)
