"""Interface for customer repository."""

from abc import ABC, abstractmethod
from typing import ContextManager, Optional

from ...domain.customer import Customer


class ICustomerRepository(ABC):
    """Contract for customer data access."""

    @abstractmethod
    def get_all(self) -> list[Customer]:
        """Gets all customers."""
        pass

    @abstractmethod
    def get_by_id(self, customer_id: str) -> Optional[Customer]:
        """Gets a customer by ID."""
        pass

    @abstractmethod
    def get_by_phone(self, phone: str) -> Optional[Customer]:
        """Gets a customer by exact phone number."""
        pass

    @abstractmethod
    def create(self, customer: Customer) -> Customer:
        """Creates a new customer."""
        pass

    @abstractmethod
    def update(self, customer: Customer) -> Customer:
        """Replaces the stored customer with the same ID."""
        pass

    @abstractmethod
    def delete(self, customer_id: str) -> Customer:
        """Removes a customer and returns it. Raises NotFoundError if missing."""
        pass

    @abstractmethod
    def locked(self) -> ContextManager:
        """Holds the collection for a read-check-write sequence."""
        pass
