"""
Domain Errors - raised by services, mapped to HTTP responses in main.py
"""
from typing import Any, Optional


class OrbitalError(Exception):
    """Base class for all domain errors"""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(OrbitalError):
    """A referenced entity does not exist"""
    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class InvalidArgumentError(OrbitalError):
    """A value lies outside its allowed domain"""
    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class ConflictError(OrbitalError):
    """A unique field is already taken or the current state forbids the change"""
    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class InvalidTransitionError(ConflictError):
    """Booking status change not permitted by the active transition table"""
    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(
            "status",
            f"Cannot change booking status from {current} to {requested}",
        )


class AuthenticationError(OrbitalError):
    """Login failed"""
    def __init__(self, message: str = "Invalid credentials", username: Optional[str] = None):
        self.username = username
        super().__init__(message)
