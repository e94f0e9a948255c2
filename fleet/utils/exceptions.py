import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from fleet.utils.response import error_response

logger = logging.getLogger(__name__)


# Store level

class StoreError(Exception):
    """Base class for errors raised by the vehicle store."""


class VehicleNotFoundError(StoreError):
    def __init__(self, message: str = "there is no vehicle with these characteristics"):
        super().__init__(message)


class VehicleAlreadyExistsError(StoreError):
    def __init__(self, message: str = "vehicle already exists"):
        super().__init__(message)


class InvalidQueryError(StoreError):
    def __init__(self, message: str = "invalid query"):
        super().__init__(message)


# Service level

class ServiceError(Exception):
    """Base class for errors raised by the vehicle service."""

    status_code = 500


class NotFoundError(ServiceError):
    status_code = 404


class AlreadyExistsError(ServiceError):
    status_code = 409


class FieldRequiredError(ServiceError):
    status_code = 400

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"field required: {field}")


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def service_exception_handler(request: Request, exc: ServiceError) -> JSONResponse:
        logger.debug("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(str(exc)),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=error_response("Invalid request", data=jsonable_errors(exc)),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_response("Internal server error"),
        )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
