"""Service catalog endpoints."""

from typing import Optional

from fastapi import APIRouter, Query

from ..domain.errors import NotFoundError
from ..models import ServiceCreate, ServiceUpdate
from ..operations import catalog

router = APIRouter(prefix="/services", tags=["services"])


def _active_filter(value: str):
    if value == "all":
        return "all"
    return value.lower() != "false"


@router.get("")
def list_services(
    search: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    is_active: str = Query("true", alias="isActive", description="true, false or all"),
):
    """List catalog entries; active ones only unless isActive says otherwise."""
    services = catalog.list_services(search, category, _active_filter(is_active))
    return [s.to_dict() for s in services]


@router.get("/{service_id}")
def get_service(service_id: str):
    service = catalog.get_service(service_id)
    if not service:
        raise NotFoundError("Service", service_id)
    return service.to_dict()


@router.post("", status_code=201)
def create_service(data: ServiceCreate):
    service = catalog.create_service(
        data.name,
        data.duration_minutes,
        data.price,
        data.category,
        data.description,
    )
    return service.to_dict()


@router.put("/{service_id}")
def update_service(service_id: str, data: ServiceUpdate):
    return catalog.update_service(service_id, data.model_dump(exclude_unset=True)).to_dict()


@router.delete("/{service_id}")
def delete_service(service_id: str):
    """Soft delete: the service is deactivated, never removed."""
    return catalog.deactivate_service(service_id).to_dict()
