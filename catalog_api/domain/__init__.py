"""Domain layer - error taxonomy shared by services and the API.

Example usage:
    from catalog_api.domain import ErrorKind, NotFoundError

    try:
        await service.create(data, product_id)
    except NotFoundError as e:
        assert e.kind is ErrorKind.NOT_FOUND
"""

from catalog_api.domain.exceptions import (
    ConflictError,
    DomainError,
    ErrorKind,
    NotFoundError,
    UnexpectedError,
    ValidationError,
)

__all__ = [
    "ConflictError",
    "DomainError",
    "ErrorKind",
    "NotFoundError",
    "UnexpectedError",
    "ValidationError",
]
