from __future__ import annotations


class SuperAppError(Exception):
    """Base client error."""


class NetworkError(SuperAppError):
    """Transport/network layer error."""


class RequestTimeoutError(NetworkError):
    """Request did not complete within its timeout."""

    def __init__(self, message: str, timeout_s: float | None = None):
        super().__init__(message)
        self.timeout_s = timeout_s


class ApiError(SuperAppError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class EncodeError(SuperAppError):
    """Request body could not be encoded as JSON."""


class DecodeError(SuperAppError):
    """Response body was not the JSON object the host should return."""

    def __init__(self, message: str, body: str | None = None):
        super().__init__(message)
        self.body = body
