"""Custom exception types for domain and API layers."""


class AppError(Exception):
    """Base app exception, rendered to clients as ``{"message": ...}``."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Missing, malformed or out-of-range request input."""


class ConflictError(AppError):
    """Request conflicts with an existing record."""


class NotFoundError(AppError):
    """Referenced record does not exist."""

    status_code = 404
