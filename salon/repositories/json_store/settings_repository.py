"""JSON file implementation of SettingsRepository."""

from datetime import datetime
from typing import Optional

from ..interfaces.settings_repository import ISettingsRepository
from ...constants.config_keys import Collections
from ...domain.setting import Setting
from .connection import JSONFileStore


class JSONSettingsRepository(ISettingsRepository):
    """JSON file implementation of settings repository."""

    def __init__(self, store: JSONFileStore):
        self._store = store

    def locked(self):
        return self._store.lock(Collections.SETTINGS)

    def get(self, key: str) -> Optional[Setting]:
        """Gets a setting by key."""
        for record in self._store.read(Collections.SETTINGS):
            if record.get("key") == key:
                return Setting.from_dict(record)
        return None

    def set(self, key: str, value: dict) -> Setting:
        """Creates or replaces a setting."""
        setting = Setting(key=key, value=value, updated_at=datetime.now())
        with self._store.transaction(Collections.SETTINGS) as records:
            for index, record in enumerate(records):
                if record.get("key") == key:
                    records[index] = setting.to_dict()
                    break
            else:
                records.append(setting.to_dict())
        return setting

    def delete(self, key: str) -> bool:
        """Deletes a setting. Returns False, writing nothing, if the key is absent."""
        with self.locked():
            if self.get(key) is None:
                return False
            with self._store.transaction(Collections.SETTINGS) as records:
                records[:] = [r for r in records if r.get("key") != key]
        return True
