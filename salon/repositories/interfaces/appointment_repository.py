"""Interface for appointment repository."""

from abc import ABC, abstractmethod
from typing import ContextManager, Optional

from ...domain.appointment import Appointment


class IAppointmentRepository(ABC):
    """Contract for appointment data access."""

    @abstractmethod
    def get_all(self) -> list[Appointment]:
        """Gets all appointments, ordered by start."""
        pass

    @abstractmethod
    def get_by_id(self, appointment_id: str) -> Optional[Appointment]:
        """Gets an appointment by ID."""
        pass

    @abstractmethod
    def get_by_customer(self, customer_id: str) -> list[Appointment]:
        """Gets a customer's appointments, most recent first."""
        pass

    @abstractmethod
    def create(self, appointment: Appointment) -> Appointment:
        """Creates a new appointment."""
        pass

    @abstractmethod
    def update(self, appointment: Appointment) -> Appointment:
        """Replaces the stored appointment with the same ID."""
        pass

    @abstractmethod
    def delete(self, appointment_id: str) -> Appointment:
        """Removes an appointment and returns it. Raises NotFoundError if missing."""
        pass

    @abstractmethod
    def locked(self) -> ContextManager:
        """Holds the collection for a read-check-write sequence."""
        pass
