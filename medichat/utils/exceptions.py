from typing import Any, Dict, Optional

from medichat.utils.tracing import current_trace_id


def status_to_code(status_code: int) -> str:
    mapping = {
        400: "BAD_REQUEST",
        401: "UNAUTHORIZED",
        403: "FORBIDDEN",
        404: "NOT_FOUND",
        422: "UNPROCESSABLE_ENTITY",
        429: "TOO_MANY_REQUESTS",
        500: "INTERNAL_SERVER_ERROR",
    }
    return mapping.get(status_code, f"HTTP_{status_code}")


class MedichatError(Exception):
    """Base error carrying an HTTP-style status and envelope fields."""

    status_code = 500

    def __init__(self, message: str, details: Any = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code

    @property
    def code(self) -> str:
        return status_to_code(self.status_code)

    def to_envelope(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "trace_id": current_trace_id(),
        }
        if self.details is not None:
            body["details"] = self.details
        return body


class InvalidRequestError(MedichatError):
    status_code = 400


class RulesConfigError(MedichatError):
    """The clinical rule table could not be read or is malformed."""

    status_code = 500
