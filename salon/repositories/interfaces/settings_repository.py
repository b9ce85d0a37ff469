"""Interface for settings repository."""

from abc import ABC, abstractmethod
from typing import ContextManager, Optional

from ...domain.setting import Setting


class ISettingsRepository(ABC):
    """Contract for key/value settings access."""

    @abstractmethod
    def get(self, key: str) -> Optional[Setting]:
        """Gets a setting by key."""
        pass

    @abstractmethod
    def set(self, key: str, value: dict) -> Setting:
        """Creates or replaces a setting."""
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Deletes a setting."""
        pass

    @abstractmethod
    def locked(self) -> ContextManager:
        """Holds the collection for a read-check-write sequence."""
        pass
