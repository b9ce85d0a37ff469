"""Customer endpoints, including visit history and adjustment suggestions."""

from typing import Optional

from fastapi import APIRouter, Query

from ..domain.errors import NotFoundError
from ..models import AnalysisRequest, CustomerCreate, CustomerUpdate, SuggestionRequest
from ..operations import customers, history

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("")
def list_customers(
    search: Optional[str] = Query(None),
    sort_by: str = Query("name", alias="sortBy"),
    sort_order: str = Query("asc", alias="sortOrder"),
):
    """List customers with their visit statistics."""
    return [v.to_dict() for v in customers.list_customers(search, sort_by, sort_order)]


@router.get("/{customer_id}")
def get_customer(customer_id: str):
    """Customer, statistics and all appointments, most recent first."""
    view = customers.get_customer(customer_id)
    if not view:
        raise NotFoundError("Customer", customer_id)
    return view.to_dict()


@router.post("", status_code=201)
def create_customer(data: CustomerCreate):
    return customers.create_customer(data.name, data.phone, **data.details()).to_dict()


@router.put("/{customer_id}")
def update_customer(customer_id: str, data: CustomerUpdate):
    return customers.update_customer(customer_id, data.changes()).to_dict()


@router.delete("/{customer_id}")
def delete_customer(customer_id: str):
    return customers.delete_customer(customer_id).to_dict()


@router.get("/{customer_id}/history")
def get_history(
    customer_id: str,
    completed_only: bool = Query(False, alias="completedOnly"),
):
    return [a.to_dict() for a in history.get_customer_history(customer_id, completed_only)]


@router.post("/{customer_id}/history/analysis")
def analyze_history(customer_id: str, data: AnalysisRequest):
    """Per-service statistics; services never completed are omitted."""
    results = history.analyze_adjustments(customer_id, data.service_ids)
    return [r.to_dict() for r in results]


@router.post("/{customer_id}/history/suggestions")
def suggest_from_history(customer_id: str, data: SuggestionRequest):
    suggestions = history.suggest_adjustments(
        customer_id,
        [s.to_domain() for s in data.services],
        data.use_average,
        data.service_ids,
    )
    return [s.to_dict() for s in suggestions]
