"""
Domain enums for MealPlanner application.
Contains all enumeration types used across the domain layer.
"""

import enum


class ServiceStatus(str, enum.Enum):
    """Outcome of a mutating service operation.

    Not to be confused with an HTTP status: the transport layer decides how
    each outcome is rendered.
    """

    NOT_FOUND = "not_found"
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    ERROR = "error"
    SUCCESS = "success"
    # Caller error: the ingredient is already linked to the recipe
    DUPLICATE = "duplicate"
