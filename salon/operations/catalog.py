"""Operations for the service catalog."""

import uuid
from datetime import datetime
from typing import Optional, Union

from ..config import logger as log
from ..container import get_container
from ..domain.errors import NotFoundError, ValidationError
from ..domain.service import Service

ActiveFilter = Union[bool, str, None]


def _matches(service: Service, search: str) -> bool:
    needle = search.lower()
    return (
        needle in service.name.lower()
        or needle in service.category.lower()
        or (bool(service.description) and needle in service.description.lower())
    )


def _validate_numbers(duration_minutes: Optional[int], price: Optional[int]) -> None:
    if duration_minutes is not None and duration_minutes <= 0:
        raise ValidationError("Duration must be at least 1 minute", "duration")
    if price is not None and price < 0:
        raise ValidationError("Price must not be negative", "price")


def list_services(
    search: Optional[str] = None,
    category: Optional[str] = None,
    is_active: ActiveFilter = True,
) -> list[Service]:
    """Lists catalog entries sorted by name.

    Args:
        search: Case-insensitive text matched against name, category and description.
        category: Exact category; None or "all" disables the filter.
        is_active: True or False to filter; None or "all" returns both.
    """
    log.debug("ops.catalog", "list_services", search=search, category=category, is_active=is_active)
    services = get_container().services.get_all()

    if search:
        services = [s for s in services if _matches(s, search)]
    if category and category != "all":
        services = [s for s in services if s.category == category]
    if is_active is not None and is_active != "all":
        services = [s for s in services if s.is_active == bool(is_active)]

    return sorted(services, key=lambda s: s.name)


def get_service(service_id: str) -> Optional[Service]:
    return get_container().services.get_by_id(service_id)


def create_service(
    name: str,
    duration_minutes: int,
    price: int,
    category: str,
    description: Optional[str] = None,
) -> Service:
    """Adds a service to the catalog.

    Raises:
        ValidationError: Missing name/category, bad numbers, or the name is
            already used by an active service.
    """
    name = (name or "").strip()
    category = (category or "").strip()
    log.info("ops.catalog", "create_service called", name=name, category=category)

    if not name or not category:
        raise ValidationError("Name, duration, price and category are required")
    _validate_numbers(duration_minutes, price)

    container = get_container()
    with container.services.locked():
        if container.services.find_active_by_name(name):
            log.warn("ops.catalog", "duplicate service name", name=name)
            raise ValidationError(f"Service name '{name}' is already in use", "name")

        now = datetime.now()
        service = Service(
            id=str(uuid.uuid4()),
            name=name,
            duration_minutes=int(duration_minutes),
            price=int(price),
            category=category,
            description=(description or "").strip(),
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        return container.services.create(service)


def update_service(service_id: str, changes: dict) -> Service:
    """Applies a partial update.

    Args:
        service_id: Service ID.
        changes: Any of name, duration_minutes, price, category, description, is_active.

    Raises:
        NotFoundError: Unknown service.
        ValidationError: Invalid values or duplicate active name.
    """
    log.info("ops.catalog", "update_service called", service_id=service_id, fields=sorted(changes))
    container = get_container()
    with container.services.locked():
        service = container.services.get_by_id(service_id)
        if not service:
            raise NotFoundError("Service", service_id)

        if "name" in changes:
            name = (changes["name"] or "").strip()
            if not name:
                raise ValidationError("Service name is required", "name")
            service.name = name
        if "category" in changes and (changes["category"] or "").strip():
            service.category = changes["category"].strip()
        if "description" in changes and changes["description"] is not None:
            service.description = changes["description"].strip()

        _validate_numbers(changes.get("duration_minutes"), changes.get("price"))
        if changes.get("duration_minutes") is not None:
            service.duration_minutes = int(changes["duration_minutes"])
        if changes.get("price") is not None:
            service.price = int(changes["price"])
        if changes.get("is_active") is not None:
            service.is_active = bool(changes["is_active"])

        if service.is_active and container.services.find_active_by_name(
            service.name, exclude_id=service.id
        ):
            log.warn("ops.catalog", "duplicate service name", name=service.name)
            raise ValidationError(f"Service name '{service.name}' is already in use", "name")

        service.updated_at = datetime.now()
        return container.services.update(service)


def deactivate_service(service_id: str) -> Service:
    """Soft-deletes a service. Past appointments keep their snapshots."""
    log.info("ops.catalog", "deactivate_service called", service_id=service_id)
    container = get_container()
    with container.services.locked():
        service = container.services.get_by_id(service_id)
        if not service:
            raise NotFoundError("Service", service_id)

        service.is_active = False
        service.updated_at = datetime.now()
        return container.services.update(service)
