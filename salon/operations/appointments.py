"""Operations for appointments: booking, edits and the status lifecycle."""

import uuid
from datetime import datetime
from typing import Optional, Union

from ..config import logger as log
from ..container import Container, get_container
from ..domain.adjustable_service import AdjustableService
from ..domain.appointment import STATUSES, Appointment, ServiceSnapshot, derive_title
from ..domain.dates import parse_datetime
from ..domain.errors import InvalidStateTransitionError, NotFoundError, ValidationError

ServiceInput = Union[ServiceSnapshot, AdjustableService, dict]


def _parse_start(value: Union[str, datetime, None]) -> datetime:
    try:
        start = parse_datetime(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid start time: {value}", "start")
    if start is None:
        raise ValidationError("Start time is required", "start")
    return start


def _to_snapshot(container: Container, item: ServiceInput) -> ServiceSnapshot:
    """Normalizes one selected service into the stored snapshot form.

    Dicts may carry only an id; missing name, duration or price are taken
    from the catalog entry.
    """
    if isinstance(item, AdjustableService):
        snapshot = item.to_snapshot()
    elif isinstance(item, ServiceSnapshot):
        snapshot = item
    else:
        service_id = str(item.get("id") or "")
        if not service_id:
            raise ValidationError("Each service needs an id", "services")
        missing = [k for k in ("name", "duration", "price") if item.get(k) is None]
        catalog_entry = container.services.get_by_id(service_id) if missing else None
        if missing and not catalog_entry:
            raise NotFoundError("Service", service_id)
        name = item["name"] if item.get("name") is not None else catalog_entry.name
        try:
            snapshot = ServiceSnapshot(
                id=service_id,
                name=name,
                duration=int(
                    item["duration"] if item.get("duration") is not None
                    else catalog_entry.duration_minutes
                ),
                price=int(item["price"] if item.get("price") is not None else catalog_entry.price),
            )
        except (TypeError, ValueError):
            raise ValidationError(f"Duration and price of '{name}' must be whole numbers", "services")

    if snapshot.duration <= 0:
        raise ValidationError(f"Duration of '{snapshot.name}' must be positive", "services")
    if snapshot.price < 0:
        raise ValidationError(f"Price of '{snapshot.name}' must not be negative", "services")
    return snapshot


def _resolve_services(container: Container, items: Optional[list]) -> list[ServiceSnapshot]:
    if not items:
        raise ValidationError("Select at least one service", "services")
    return [_to_snapshot(container, item) for item in items]


def list_appointments(
    status: Optional[str] = None,
    client_id: Optional[str] = None,
) -> list[Appointment]:
    """Lists appointments ordered by start, optionally filtered."""
    log.debug("ops.appointments", "list_appointments", status=status, client_id=client_id)
    appointments = get_container().appointments.get_all()
    if status and status != "all":
        appointments = [a for a in appointments if a.status == status]
    if client_id:
        appointments = [a for a in appointments if a.client_id == client_id]
    return appointments


def get_appointment(appointment_id: str) -> Optional[Appointment]:
    return get_container().appointments.get_by_id(appointment_id)


def create_appointment(
    client_name: Optional[str],
    start: Union[str, datetime],
    services: list[ServiceInput],
    client_id: Optional[str] = None,
    phone: Optional[str] = None,
    note: str = "",
    title: Optional[str] = None,
) -> Appointment:
    """Books an appointment.

    Args:
        client_name: Name shown on the booking. Defaults to the customer's name.
        start: Start as a datetime or ISO-8601 string.
        services: Selected services, in order. AdjustableServices are saved
            with their adjusted values; dicts may be bare catalog ids.
        client_id: Registered customer, if any.
        phone: Contact phone. Defaults to the customer's phone.
        note: Free text.
        title: Custom title. Defaults to the service names joined with " & ".

    Returns:
        Appointment: The stored booking, status "scheduled".

    Raises:
        ValidationError: Missing client, start or services, or bad service values.
        NotFoundError: client_id or a bare service id does not resolve.
    """
    log.info(
        "ops.appointments",
        "create_appointment called",
        client_id=client_id,
        client_name=client_name,
        start=start,
        services=len(services or []),
    )
    container = get_container()

    customer = None
    if client_id:
        customer = container.customers.get_by_id(client_id)
        if not customer:
            raise NotFoundError("Customer", client_id)

    client_name = (client_name or "").strip() or (customer.name if customer else "")
    if not client_name:
        raise ValidationError("Client name is required", "clientName")

    start_at = _parse_start(start)
    snapshots = _resolve_services(container, services)

    now = datetime.now()
    appointment = Appointment(
        id=str(uuid.uuid4()),
        title=(title or "").strip() or derive_title(snapshots),
        start=start_at,
        end=start_at,
        client_id=client_id or None,
        client_name=client_name,
        phone=(phone or "").strip() or (customer.phone if customer else ""),
        services=snapshots,
        note=note or "",
        status="scheduled",
        created_at=now,
        updated_at=now,
    )
    appointment.recalculate()
    return container.appointments.create(appointment)


def _require(container: Container, appointment_id: str) -> Appointment:
    appointment = container.appointments.get_by_id(appointment_id)
    if not appointment:
        raise NotFoundError("Appointment", appointment_id)
    return appointment


def _require_scheduled(appointment: Appointment) -> None:
    if not appointment.is_scheduled:
        log.warn(
            "ops.appointments",
            "modification refused",
            appointment_id=appointment.id,
            status=appointment.status,
        )
        raise InvalidStateTransitionError(appointment.status)


def _apply_transition(appointment: Appointment, target: str) -> None:
    if target not in STATUSES:
        raise ValidationError(f"Unknown status '{target}'", "status")
    if target == appointment.status:
        return
    if not appointment.can_transition_to(target):
        log.warn(
            "ops.appointments",
            "transition refused",
            appointment_id=appointment.id,
            current=appointment.status,
            target=target,
        )
        raise InvalidStateTransitionError(appointment.status, target)
    appointment.status = target


def update_appointment(appointment_id: str, changes: dict) -> Appointment:
    """Merges changes into a scheduled appointment.

    Accepted keys: title, start, services, note, client_name, phone,
    client_id, status. Anything else (id, end, totals, timestamps) is
    ignored; end and totals always follow services and start.

    Raises:
        NotFoundError: Unknown appointment, customer or bare service id.
        InvalidStateTransitionError: The appointment is completed or
            cancelled, or the requested status change is not allowed.
        ValidationError: Invalid values.
    """
    log.info(
        "ops.appointments",
        "update_appointment called",
        appointment_id=appointment_id,
        fields=sorted(changes),
    )
    container = get_container()
    with container.appointments.locked():
        appointment = _require(container, appointment_id)
        _require_scheduled(appointment)

        snapshots = None
        if changes.get("services") is not None:
            snapshots = _resolve_services(container, changes["services"])
        start_at = _parse_start(changes["start"]) if changes.get("start") is not None else None

        if "client_id" in changes:
            client_id = changes["client_id"] or None
            if client_id and not container.customers.get_by_id(client_id):
                raise NotFoundError("Customer", client_id)
            appointment.client_id = client_id
        if "client_name" in changes:
            client_name = (changes["client_name"] or "").strip()
            if not client_name:
                raise ValidationError("Client name is required", "clientName")
            appointment.client_name = client_name
        if changes.get("phone") is not None:
            appointment.phone = changes["phone"].strip()
        if changes.get("note") is not None:
            appointment.note = changes["note"]

        if snapshots is not None:
            appointment.replace_services(snapshots)
        if start_at is not None:
            appointment.reschedule(start_at)
        if "title" in changes:
            appointment.title = (changes["title"] or "").strip() or derive_title(appointment.services)

        if changes.get("status") is not None:
            _apply_transition(appointment, changes["status"])

        appointment.recalculate()
        appointment.updated_at = datetime.now()
        return container.appointments.update(appointment)


def reschedule_appointment(appointment_id: str, start: Union[str, datetime]) -> Appointment:
    """Moves a scheduled appointment; end follows from the total duration."""
    log.info("ops.appointments", "reschedule_appointment called", appointment_id=appointment_id, start=start)
    start_at = _parse_start(start)
    container = get_container()
    with container.appointments.locked():
        appointment = _require(container, appointment_id)
        _require_scheduled(appointment)

        appointment.reschedule(start_at)
        appointment.updated_at = datetime.now()
        return container.appointments.update(appointment)


def transition_appointment(appointment_id: str, status: str) -> Appointment:
    """Moves an appointment to completed or cancelled.

    Raises:
        InvalidStateTransitionError: The appointment already left "scheduled".
    """
    log.info("ops.appointments", "transition_appointment called", appointment_id=appointment_id, status=status)
    container = get_container()
    with container.appointments.locked():
        appointment = _require(container, appointment_id)
        if status not in STATUSES:
            raise ValidationError(f"Unknown status '{status}'", "status")
        if not appointment.can_transition_to(status):
            log.warn(
                "ops.appointments",
                "transition refused",
                appointment_id=appointment.id,
                current=appointment.status,
                target=status,
            )
            raise InvalidStateTransitionError(appointment.status, status)

        appointment.status = status
        appointment.updated_at = datetime.now()
        return container.appointments.update(appointment)


def complete_appointment(appointment_id: str) -> Appointment:
    return transition_appointment(appointment_id, "completed")


def cancel_appointment(appointment_id: str) -> Appointment:
    return transition_appointment(appointment_id, "cancelled")


def delete_appointment(appointment_id: str) -> Appointment:
    """Removes an appointment permanently and returns it."""
    log.info("ops.appointments", "delete_appointment called", appointment_id=appointment_id)
    return get_container().appointments.delete(appointment_id)
