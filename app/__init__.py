"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    MealPlannerError,
    ServiceValidationError,
    NotFoundError,
    ConflictError,
    ServiceError,
)

__all__ = [
    "settings",
    "MealPlannerError",
    "ServiceValidationError",
    "NotFoundError",
    "ConflictError",
    "ServiceError",
]
