"""Factory for creating Container with the JSON file implementation."""

from typing import Optional

from ...container import Container
from .appointment_repository import JSONAppointmentRepository
from .connection import JSONFileStore
from .customer_repository import JSONCustomerRepository
from .service_repository import JSONServiceRepository
from .settings_repository import JSONSettingsRepository


def create_json_container(data_dir: Optional[str] = None) -> Container:
    """Creates a Container with JSON file repository implementations.

    Args:
        data_dir: Directory holding the collection files. Uses SALON_DATA_DIR if not specified.

    Returns:
        Container: Configured with JSON file repositories.
    """
    store = JSONFileStore(data_dir)

    return Container(
        services=JSONServiceRepository(store),
        customers=JSONCustomerRepository(store),
        appointments=JSONAppointmentRepository(store),
        settings=JSONSettingsRepository(store),
    )
