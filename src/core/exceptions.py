"""Custom exceptions raised by the service and API layers.

Each exception carries the HTTP status it maps to, so the API error handlers are the only place a failure gets turned into a response.
"""

from dataclasses import dataclass

from fastapi import status


class GameServiceError(Exception):
    """Base class for all expected failures of the games service."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class BadRequestError(GameServiceError):
    """Caller supplied something unusable (non-positive id, invalid fields, ...)."""

    http_status = status.HTTP_400_BAD_REQUEST


@dataclass(frozen=True)
class FieldError:
    """A single failed validation rule for one (wire) field name."""

    field: str
    message: str


class RequestValidationFailedError(BadRequestError):
    """One or more field rules failed for a request body."""

    def __init__(self, failures: list[FieldError]) -> None:
        self.failures = failures
        super().__init__("; ".join(failure.message for failure in failures))

    def errors_by_field(self) -> dict[str, list[str]]:
        grouped: dict[str, list[str]] = {}
        for failure in self.failures:
            grouped.setdefault(failure.field, []).append(failure.message)
        return grouped


class NotFoundError(GameServiceError):
    """Requested resource does not exist."""

    http_status = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, key: object) -> None:
        self.resource = resource
        self.key = key
        super().__init__(f"{resource} with id {key} was not found.")
