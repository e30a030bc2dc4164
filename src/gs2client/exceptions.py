"""Exception hierarchy for GS2 API errors."""

from __future__ import annotations

import json
from typing import Any


def _render(errors: Any) -> str:
    return json.dumps(errors, separators=(",", ":"))


class Gs2Error(Exception):
    """Base exception for all GS2 errors.

    ``errors`` holds the decoded error payload sent by the server (usually a
    list of error records, occasionally a mapping). ``status_code`` is None
    for errors raised locally.
    """

    status_code: int | None = None

    def __init__(self, errors: Any, *, status_code: int | None = None) -> None:
        self.errors = errors
        if status_code is not None:
            self.status_code = status_code
        super().__init__(_render(errors))

    def __str__(self) -> str:
        return _render(self.errors)


class BadRequestError(Gs2Error):
    """400 - Invalid request parameters."""

    status_code = 400


class UnauthorizedError(Gs2Error):
    """401 - Credentials rejected or missing."""

    status_code = 401


class QuotaExceedError(Gs2Error):
    """402 - Usage quota exceeded."""

    status_code = 402


class NotFoundError(Gs2Error):
    """404 - Resource not found."""

    status_code = 404


class ConflictError(Gs2Error):
    """409 - Conflicting resource state."""

    status_code = 409


class InternalServerError(Gs2Error):
    """500 - Server failure, transport failure, or unrecognized status."""

    status_code = 500


class BadGatewayError(Gs2Error):
    """502 - Bad gateway."""

    status_code = 502


class ServiceUnavailableError(Gs2Error):
    """503 - Service unavailable."""

    status_code = 503


class RequestTimeoutError(Gs2Error):
    """504 - Upstream timed out."""

    status_code = 504


class MissingBodyError(Gs2Error):
    """POST or PUT issued without a request body."""

    def __init__(self, errors: Any = None) -> None:
        if errors is None:
            errors = {"message": "request body is required"}
        super().__init__(errors)
