"""
rent_car.errors

Error taxonomy shared by the service boundary.

Responsibilities:
- Classify failures as malformed-input, not-found or storage/internal.
- Carry the HTTP status each class maps to, so handlers never guess.
"""

from __future__ import annotations

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class ServiceError(Exception):
    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR


class MalformedInputError(ServiceError):
    """Client-caused: bad JSON, invalid identifier, unparsable pagination."""

    status_code = HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    status_code = HTTP_404_NOT_FOUND


class StorageError(ServiceError):
    """Any persistence or infrastructure failure."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR


class DeadlineExceededError(StorageError):
    pass


# --- Module Notes -----------------------------------------------------------
# None of these are retried inside the service; retry policy belongs to callers.
