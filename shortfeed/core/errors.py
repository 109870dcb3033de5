# ============================================================================
# FILE: shortfeed/core/errors.py
# Error taxonomy shared by services and routes
# Every AppError renders as {"error": code} with its HTTP status
# ============================================================================
from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP response"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, code: str):
        super().__init__(code)
        self.code = code


class InvalidInput(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(AppError):
    status_code = status.HTTP_409_CONFLICT


class Internal(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
