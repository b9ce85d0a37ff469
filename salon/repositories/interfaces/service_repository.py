"""Interface for service repository."""

from abc import ABC, abstractmethod
from typing import ContextManager, Optional

from ...domain.service import Service


class IServiceRepository(ABC):
    """Contract for service catalog data access."""

    @abstractmethod
    def get_all(self) -> list[Service]:
        """Gets every service, active or not."""
        pass

    @abstractmethod
    def get_by_id(self, service_id: str) -> Optional[Service]:
        """Gets a service by ID."""
        pass

    @abstractmethod
    def find_active_by_name(
        self, name: str, exclude_id: Optional[str] = None
    ) -> Optional[Service]:
        """Finds an active service with exactly this name, ignoring exclude_id."""
        pass

    @abstractmethod
    def create(self, service: Service) -> Service:
        """Creates a new service."""
        pass

    @abstractmethod
    def update(self, service: Service) -> Service:
        """Replaces the stored service with the same ID."""
        pass

    @abstractmethod
    def locked(self) -> ContextManager:
        """Holds the collection for a read-check-write sequence."""
        pass
