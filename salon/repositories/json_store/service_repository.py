"""JSON file implementation of ServiceRepository."""

from typing import Optional

from ..interfaces.service_repository import IServiceRepository
from ...config import logger as log
from ...constants.config_keys import Collections
from ...domain.errors import NotFoundError
from ...domain.service import Service
from .connection import JSONFileStore


class JSONServiceRepository(IServiceRepository):
    """JSON file implementation of service repository."""

    def __init__(self, store: JSONFileStore):
        self._store = store

    def locked(self):
        return self._store.lock(Collections.SERVICES)

    def get_all(self) -> list[Service]:
        """Gets every service, active or not."""
        records = self._store.read(Collections.SERVICES)
        results = [Service.from_dict(r) for r in records]
        log.debug("repo.service", "get_all result", count=len(results))
        return results

    def get_by_id(self, service_id: str) -> Optional[Service]:
        """Gets a service by ID."""
        log.debug("repo.service", "get_by_id", service_id=service_id)
        for record in self._store.read(Collections.SERVICES):
            if str(record["id"]) == service_id:
                return Service.from_dict(record)
        log.debug("repo.service", "get_by_id result", found=False)
        return None

    def find_active_by_name(
        self, name: str, exclude_id: Optional[str] = None
    ) -> Optional[Service]:
        """Finds an active service with exactly this name, ignoring exclude_id."""
        for service in self.get_all():
            if service.is_active and service.name == name and service.id != exclude_id:
                log.debug("repo.service", "find_active_by_name hit", service_id=service.id)
                return service
        return None

    def create(self, service: Service) -> Service:
        """Creates a new service."""
        log.info("repo.service", "create", service_id=service.id, name=service.name)
        with self._store.transaction(Collections.SERVICES) as records:
            records.append(service.to_dict())
        return service

    def update(self, service: Service) -> Service:
        """Replaces the stored service with the same ID."""
        log.info(
            "repo.service",
            "update",
            service_id=service.id,
            is_active=service.is_active,
        )
        with self._store.transaction(Collections.SERVICES) as records:
            for index, record in enumerate(records):
                if str(record["id"]) == service.id:
                    records[index] = service.to_dict()
                    break
            else:
                raise NotFoundError("Service", service.id)
        return service
