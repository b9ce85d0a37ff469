"""Appointment endpoints."""

from typing import Optional

from fastapi import APIRouter, Query

from ..domain.errors import NotFoundError
from ..models import AppointmentCreate, AppointmentUpdate, RescheduleRequest
from ..operations import appointments

router = APIRouter(prefix="/appointments", tags=["appointments"])


@router.get("")
def list_appointments(
    status: Optional[str] = Query(None),
    client_id: Optional[str] = Query(None, alias="clientId"),
):
    return [a.to_dict() for a in appointments.list_appointments(status, client_id)]


@router.get("/{appointment_id}")
def get_appointment(appointment_id: str):
    appointment = appointments.get_appointment(appointment_id)
    if not appointment:
        raise NotFoundError("Appointment", appointment_id)
    return appointment.to_dict()


@router.post("", status_code=201)
def create_appointment(data: AppointmentCreate):
    """Book an appointment. Totals, end and the default title are computed."""
    appointment = appointments.create_appointment(
        client_name=data.client_name,
        start=data.start,
        services=data.selected_services(),
        client_id=data.client_id,
        phone=data.phone,
        note=data.note or "",
        title=data.title,
    )
    return appointment.to_dict()


@router.put("/{appointment_id}")
def update_appointment(appointment_id: str, data: AppointmentUpdate):
    return appointments.update_appointment(appointment_id, data.changes()).to_dict()


@router.delete("/{appointment_id}")
def delete_appointment(appointment_id: str):
    return appointments.delete_appointment(appointment_id).to_dict()


@router.post("/{appointment_id}/complete")
def complete_appointment(appointment_id: str):
    return appointments.complete_appointment(appointment_id).to_dict()


@router.post("/{appointment_id}/cancel")
def cancel_appointment(appointment_id: str):
    return appointments.cancel_appointment(appointment_id).to_dict()


@router.post("/{appointment_id}/reschedule")
def reschedule_appointment(appointment_id: str, data: RescheduleRequest):
    return appointments.reschedule_appointment(appointment_id, data.start).to_dict()
