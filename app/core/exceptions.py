# /app/core/exceptions.py

"""
Domain exception hierarchy. Services raise these; routers translate them into
HTTP responses. Nothing here knows about FastAPI.
"""

from typing import List, Any


class AppError(Exception):
    """Base exception for all application errors."""
    pass


class ValidationError(AppError):
    """Required input is missing or outside its allowed range."""
    pass


class AuthenticationError(AppError):
    """Credentials or bearer token could not be verified."""
    pass


class NotFoundError(AppError):
    """The requested record does not exist."""
    pass


class InsufficientDataError(AppError):
    """There is not enough performance history to build a study plan."""
    pass


class AIServiceError(AppError):
    """The AI text-generation capability failed."""
    pass


class AIUnavailableError(AIServiceError):
    """The AI capability timed out, hit a quota, or reported being busy."""
    pass


class GenerationError(AppError):
    """The AI capability answered, but with content that could not be used."""
    pass


class DatabaseError(AppError):
    """
    A persistence operation failed.

    `saved` holds any records that were written before the failure; they
    remain valid and are reported back to the caller.
    """

    def __init__(self, message: str, saved: List[Any] = None):
        super().__init__(message)
        self.saved = saved or []
