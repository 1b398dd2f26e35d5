"""Errors surfaced to API clients."""


class APIError(Exception):
    """Base error rendered as ``{"message": ...}`` with ``status_code``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequest(APIError):
    status_code = 400


class Conflict(BadRequest):
    """Account with this email already exists."""

    def __init__(self, message: str = "User already exists"):
        super().__init__(message)


class InvalidCredentials(BadRequest):
    """Unknown email or wrong password."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class NotFound(APIError):
    status_code = 404


class ServerError(APIError):
    """Store or unexpected failure. Detail stays in the server log."""

    def __init__(self, message: str = "Server error"):
        super().__init__(message)
