"""JSON file implementation of AppointmentRepository."""

from typing import Optional

from ..interfaces.appointment_repository import IAppointmentRepository
from ...config import logger as log
from ...constants.config_keys import Collections
from ...domain.appointment import Appointment
from ...domain.dates import sort_key
from ...domain.errors import NotFoundError
from .connection import JSONFileStore


class JSONAppointmentRepository(IAppointmentRepository):
    """JSON file implementation of appointment repository."""

    def __init__(self, store: JSONFileStore):
        self._store = store

    def locked(self):
        return self._store.lock(Collections.APPOINTMENTS)

    def _load(self) -> list[Appointment]:
        return [Appointment.from_dict(r) for r in self._store.read(Collections.APPOINTMENTS)]

    def get_all(self) -> list[Appointment]:
        """Gets all appointments, ordered by start."""
        results = sorted(self._load(), key=lambda a: sort_key(a.start))
        log.debug("repo.appointment", "get_all result", count=len(results))
        return results

    def get_by_id(self, appointment_id: str) -> Optional[Appointment]:
        """Gets an appointment by ID."""
        log.debug("repo.appointment", "get_by_id", appointment_id=appointment_id)
        for record in self._store.read(Collections.APPOINTMENTS):
            if str(record["id"]) == appointment_id:
                result = Appointment.from_dict(record)
                log.debug("repo.appointment", "get_by_id result", status=result.status)
                return result
        log.debug("repo.appointment", "get_by_id result", found=False)
        return None

    def get_by_customer(self, customer_id: str) -> list[Appointment]:
        """Gets a customer's appointments, most recent first."""
        log.debug("repo.appointment", "get_by_customer", customer_id=customer_id)
        results = sorted(
            (a for a in self._load() if a.client_id == customer_id),
            key=lambda a: sort_key(a.start),
            reverse=True,
        )
        log.debug("repo.appointment", "get_by_customer result", count=len(results))
        return results

    def create(self, appointment: Appointment) -> Appointment:
        """Creates a new appointment."""
        log.info(
            "repo.appointment",
            "create",
            appointment_id=appointment.id,
            client=appointment.client_name,
            start=appointment.start.isoformat(),
            total_price=appointment.total_price,
        )
        with self._store.transaction(Collections.APPOINTMENTS) as records:
            records.append(appointment.to_dict())
        return appointment

    def update(self, appointment: Appointment) -> Appointment:
        """Replaces the stored appointment with the same ID."""
        log.info(
            "repo.appointment",
            "update",
            appointment_id=appointment.id,
            status=appointment.status,
        )
        with self._store.transaction(Collections.APPOINTMENTS) as records:
            for index, record in enumerate(records):
                if str(record["id"]) == appointment.id:
                    records[index] = appointment.to_dict()
                    break
            else:
                raise NotFoundError("Appointment", appointment.id)
        return appointment

    def delete(self, appointment_id: str) -> Appointment:
        """Removes an appointment and returns it."""
        log.info("repo.appointment", "delete", appointment_id=appointment_id)
        with self._store.transaction(Collections.APPOINTMENTS) as records:
            for index, record in enumerate(records):
                if str(record["id"]) == appointment_id:
                    return Appointment.from_dict(records.pop(index))
            raise NotFoundError("Appointment", appointment_id)
