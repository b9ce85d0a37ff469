"""Operations for customer records and their derived statistics."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..analytics.customer_stats import CustomerStatistics, project
from ..config import logger as log
from ..container import get_container
from ..domain.appointment import Appointment
from ..domain.customer import PREFERENCE_KEYS, Customer
from ..domain.dates import sort_key
from ..domain.errors import NotFoundError, ValidationError

SORT_FIELDS = ("name", "lastVisit", "totalVisits", "totalSpent", "createdAt")

DETAIL_FIELDS = ("kana", "email", "birthday", "gender", "address", "memo")
EDITABLE_FIELDS = ("name", "phone") + DETAIL_FIELDS


@dataclass
class CustomerView:
    """A customer with statistics computed at read time."""

    customer: Customer
    statistics: CustomerStatistics
    appointments: Optional[list[Appointment]] = field(default=None)

    def to_dict(self) -> dict:
        data = {**self.customer.to_dict(), **self.statistics.to_dict()}
        if self.appointments is not None:
            data["appointments"] = [a.to_dict() for a in self.appointments]
        return data


def _sort_value(view: CustomerView, sort_by: str):
    if sort_by == "lastVisit":
        return sort_key(view.statistics.last_visit)
    if sort_by == "totalVisits":
        return view.statistics.total_visits
    if sort_by == "totalSpent":
        return view.statistics.total_spent
    if sort_by == "createdAt":
        return sort_key(view.customer.created_at)
    return view.customer.name


def list_customers(
    search: Optional[str] = None,
    sort_by: str = "name",
    sort_order: str = "asc",
) -> list[CustomerView]:
    """Lists customers with fresh statistics.

    Args:
        search: Matches name, kana, email (case-insensitive) or part of the phone.
        sort_by: One of name, lastVisit, totalVisits, totalSpent, createdAt.
        sort_order: "asc" or "desc".
    """
    log.debug("ops.customers", "list_customers", search=search, sort_by=sort_by, order=sort_order)
    container = get_container()
    customers = container.customers.get_all()
    if search:
        customers = [c for c in customers if c.matches(search)]

    appointments = container.appointments.get_all()
    views = [CustomerView(c, project(c.id, appointments)) for c in customers]

    if sort_by not in SORT_FIELDS:
        sort_by = "name"
    return sorted(
        views,
        key=lambda v: _sort_value(v, sort_by),
        reverse=sort_order == "desc",
    )


def get_customer(customer_id: str) -> Optional[CustomerView]:
    """Gets a customer with statistics and all appointments, most recent first."""
    container = get_container()
    customer = container.customers.get_by_id(customer_id)
    if not customer:
        return None

    appointments = container.appointments.get_by_customer(customer_id)
    return CustomerView(customer, project(customer_id, appointments), appointments)


def _apply_preferences(customer: Customer, preferences: Optional[dict]) -> None:
    if preferences:
        customer.preferences.update(
            {k: v for k, v in preferences.items() if k in PREFERENCE_KEYS}
        )


def create_customer(name: str, phone: str, **details) -> Customer:
    """Registers a customer.

    Args:
        name: Full name.
        phone: Phone number; must not belong to another customer.
        **details: kana, email, birthday, gender, address, memo, preferences.

    Raises:
        ValidationError: Missing name or phone, or the phone is already registered.
    """
    name = (name or "").strip()
    phone = (phone or "").strip()
    log.info("ops.customers", "create_customer called", name=name, phone=phone)

    if not name or not phone:
        raise ValidationError("Name and phone are required")

    container = get_container()
    with container.customers.locked():
        if container.customers.get_by_phone(phone):
            log.warn("ops.customers", "duplicate phone", phone=phone)
            raise ValidationError("This phone number is already registered", "phone")

        now = datetime.now()
        customer = Customer(
            id=str(uuid.uuid4()),
            name=name,
            phone=phone,
            created_at=now,
            updated_at=now,
        )
        for key in DETAIL_FIELDS:
            if details.get(key) is not None:
                setattr(customer, key, details[key])
        _apply_preferences(customer, details.get("preferences"))

        return container.customers.create(customer)


def update_customer(customer_id: str, changes: dict) -> Customer:
    """Merges changes into a customer. The ID never changes.

    Raises:
        NotFoundError: Unknown customer.
        ValidationError: Empty name, or phone taken by another customer.
    """
    log.info("ops.customers", "update_customer called", customer_id=customer_id, fields=sorted(changes))
    container = get_container()
    with container.customers.locked():
        customer = container.customers.get_by_id(customer_id)
        if not customer:
            raise NotFoundError("Customer", customer_id)

        if "name" in changes and not (changes["name"] or "").strip():
            raise ValidationError("Name is required", "name")
        if changes.get("phone") is not None:
            phone = changes["phone"].strip()
            if not phone:
                raise ValidationError("Phone is required", "phone")
            owner = container.customers.get_by_phone(phone)
            if owner and owner.id != customer_id:
                log.warn("ops.customers", "duplicate phone", phone=phone)
                raise ValidationError("This phone number is already registered", "phone")
            changes = {**changes, "phone": phone}

        for key in EDITABLE_FIELDS:
            if key in changes and changes[key] is not None:
                value = changes[key]
                setattr(customer, key, value.strip() if key == "name" else value)
        _apply_preferences(customer, changes.get("preferences"))

        customer.updated_at = datetime.now()
        return container.customers.update(customer)


def delete_customer(customer_id: str) -> Customer:
    """Removes a customer. Their appointments are kept."""
    log.info("ops.customers", "delete_customer called", customer_id=customer_id)
    return get_container().customers.delete(customer_id)
