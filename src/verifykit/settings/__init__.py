"""Provider settings stores."""

from verifykit.settings.base import SettingsStore
from verifykit.settings.env import EnvSettingsStore
from verifykit.settings.memory import InMemorySettingsStore

__all__ = ["EnvSettingsStore", "InMemorySettingsStore", "SettingsStore"]
