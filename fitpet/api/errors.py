from fastapi import HTTPException

from fitpet.core.errors import AlreadyCompletedError, ConflictError, FitPetError, NotFoundError, ValidationError

_STATUS_CODES: list[tuple[type[FitPetError], int]] = [
    (NotFoundError, 404),
    (AlreadyCompletedError, 400),
    (ValidationError, 400),
    (ConflictError, 409),
]


def to_http_exception(error: FitPetError) -> HTTPException:
    """Translate a core service error into an HTTPException."""
    for error_type, status_code in _STATUS_CODES:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=error.detail)
    return HTTPException(status_code=500, detail="Internal server error")
