"""HTTP mapping for domain and adapter errors."""

from fastapi import HTTPException, status

from userhub.adapter.error import ProviderError
from userhub.domain.error import (
    AccountConflictError,
    AccountValidationError,
    MalformedProfileError,
    NotFoundError,
)


def to_http_exception(error: Exception) -> HTTPException:
    """Map a domain or adapter error onto the HTTP response it produces.

    Args:
        error: Error raised by a use case

    Returns:
        HTTPException carrying the status code and a JSON-friendly detail

    Raises:
        Exception: The original error, when it has no HTTP mapping
    """
    if isinstance(error, AccountValidationError):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"code": error.code, "message": error.message},
        )
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, AccountConflictError):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"code": f"{error.field}_taken", "message": str(error)},
        )
    if isinstance(error, (ProviderError, MalformedProfileError)):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(error))
    raise error
