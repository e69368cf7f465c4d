"""QSettings-backed preference storage."""

from pathlib import Path

from PyQt6.QtCore import QSettings


class QSettingsBackend:
    """Durable preference storage on top of QSettings.

    Implements PreferenceBackend protocol.
    """

    def __init__(self, settings: QSettings):
        self._settings = settings

    @classmethod
    def for_application(cls, organization: str, application: str) -> "QSettingsBackend":
        """Use the platform's native settings location for the application."""
        return cls(QSettings(organization, application))

    @classmethod
    def from_file(cls, path: Path) -> "QSettingsBackend":
        """Use an INI file, e.g. for portable installs and tests."""
        return cls(QSettings(str(path), QSettings.Format.IniFormat))

    def value(self, key: str) -> str | None:
        value = self._settings.value(key)
        if value is None:
            return None
        return str(value)

    def set_value(self, key: str, value: str) -> None:
        self._settings.setValue(key, value)
        self._settings.sync()
        if self._settings.status() != QSettings.Status.NoError:
            raise OSError(f"Could not write preference '{key}' ({self._settings.status().name})")
