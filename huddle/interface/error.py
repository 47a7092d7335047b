"""Interface layer errors.

Maps domain errors onto HTTP responses.
"""

from fastapi import HTTPException, status

from huddle.domain.error import (
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Translate a domain error into an HTTPException.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException carrying the error message as detail
    """
    if isinstance(error, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, NotAuthorizedError):
        status_code = status.HTTP_403_FORBIDDEN
    elif isinstance(error, ConflictError):
        status_code = status.HTTP_409_CONFLICT
    elif isinstance(error, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=status_code, detail=str(error))


def bad_request(error: ValueError) -> HTTPException:
    """Malformed identifiers or values in an otherwise valid request."""
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
