"""
Registry layer - owns the one active bootcamp.

Usage:
    from registry import BootcampRegistry, get_registry

    registry = BootcampRegistry()      # explicit, pass it where needed
    bootcamp = registry.bootcamp

    bootcamp = get_bootcamp()          # process-wide default

The bootcamp is created once and lives as long as the registry; there is
no reset.
"""

from typing import Optional

from models import Bootcamp
import config


class BootcampRegistry:
    """Context object holding exactly one Bootcamp."""

    def __init__(self, name: Optional[str] = None, description: Optional[str] = None):
        self._bootcamp = Bootcamp(
            name=name or config.BOOTCAMP_NAME,
            description=description or config.BOOTCAMP_DESCRIPTION,
        )
        print(f"[Registry] Created: {self._bootcamp.name}")

    @property
    def bootcamp(self) -> Bootcamp:
        """The bootcamp. Always the same object."""
        return self._bootcamp


_instance: Optional[BootcampRegistry] = None


def get_registry() -> BootcampRegistry:
    """Get the process-wide registry, creating it on first access."""
    global _instance

    if _instance is None:
        _instance = BootcampRegistry()

    return _instance


def get_bootcamp() -> Bootcamp:
    """Shortcut for get_registry().bootcamp."""
    return get_registry().bootcamp


__all__ = ["BootcampRegistry", "get_registry", "get_bootcamp"]
