from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse


class ClinicError(Exception):
    status_code: int = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class InvalidArgumentError(ClinicError, ValueError):
    """A required reference or value was absent or malformed."""
    status_code = 400


class CapacityExceededError(ClinicError):
    """A bounded collection would grow past its limit."""
    status_code = 422


class NotFoundError(ClinicError):
    status_code = 404


class ConflictError(ClinicError):
    """The doctor already has an appointment at that instant, or the id is taken."""
    status_code = 409


class OutOfRangeError(ClinicError):
    """Appointment time of day falls outside opening hours."""
    status_code = 422


def create_error_response(error_message: str, status_code: int = 400) -> dict:
    """Create a standardized error response"""
    return {
        "success": False,
        "data": None,
        "error": error_message
    }


def create_success_response(data) -> dict:
    """Create a standardized success response"""
    return {
        "success": True,
        "data": data,
        "error": None
    }


async def clinic_exception_handler(request: Request, exc: ClinicError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.detail, exc.status_code)
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Custom exception handler for HTTPException"""
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(str(exc.detail), exc.status_code)
    )
