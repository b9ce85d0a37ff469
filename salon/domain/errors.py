"""Error taxonomy shared by operations and the HTTP layer."""

from typing import Optional


class SalonError(Exception):
    """Base class for errors surfaced to callers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(SalonError):
    """An id did not resolve to a record."""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class ValidationError(SalonError):
    """Input violates a constraint. Raised before any mutation."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class InvalidStateTransitionError(SalonError):
    """The appointment is not in a state that allows the requested change."""

    def __init__(self, current: str, target: Optional[str] = None):
        if target:
            message = f"Cannot change appointment status from '{current}' to '{target}'"
        else:
            message = f"Appointment is '{current}' and can no longer be modified"
        super().__init__(message)
        self.current = current
        self.target = target


class StorageError(SalonError):
    """A backing store could not be read or written."""
