"""Builders for test data."""

from datetime import datetime

from salon.domain.appointment import Appointment, ServiceSnapshot


def make_appointment(
    appointment_id: str,
    customer_id: str,
    start: datetime,
    services: list[tuple[str, str, int, int]],
    status: str = "completed",
) -> Appointment:
    """Builds an appointment directly, bypassing the booking rules.

    services are (id, name, duration, price) tuples.
    """
    snapshots = [ServiceSnapshot(id=i, name=n, duration=d, price=p) for i, n, d, p in services]
    appointment = Appointment(
        id=appointment_id,
        title=" & ".join(s.name for s in snapshots),
        start=start,
        end=start,
        client_id=customer_id,
        client_name="山田 花子",
        services=snapshots,
        status=status,
        created_at=start,
        updated_at=start,
    )
    appointment.recalculate()
    return appointment
