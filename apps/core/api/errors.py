"""
Errors raised at the ERP backend boundary.

    ApiError
    ├── TransportError   network failure, timeout, connection refused
    ├── HTTPStatusError  non-2xx answer (or a body whose status.code is not 200)
    ├── DecodeError      envelope or record does not have the expected shape
    └── JoinError        one member of a concurrent fetch failed

An empty list is not an error.
"""


class ApiError(Exception):
    """Base class; ``message`` is what the page shows to the user."""

    def __init__(self, message, status_code=None, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def __str__(self):
        return self.message


class TransportError(ApiError):
    pass


class HTTPStatusError(ApiError):
    pass


class DecodeError(ApiError):
    def __init__(self, message, errors=None, payload=None):
        super().__init__(message, payload=payload)
        self.errors = errors or {}


class JoinError(ApiError):
    """Raised by ``fetch_many``; partial results are discarded."""

    def __init__(self, message, errors):
        super().__init__(message)
        self.errors = errors


def extract_message(payload, default):
    """
    Pull the human readable message out of an error body.

    The backend answers either ``{"status": {"message": ...}}`` or
    ``{"message": ...}``; anything else falls back to ``default``.
    """
    if not isinstance(payload, dict):
        return default
    status = payload.get('status')
    if isinstance(status, dict) and status.get('message'):
        return str(status['message'])
    if payload.get('message'):
        return str(payload['message'])
    return default
