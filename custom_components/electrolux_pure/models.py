"""Data models for Electrolux Pure A9 integration."""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import StrEnum
from typing import Any

from homeassistant.helpers.typing import UNDEFINED, UndefinedType


class PollState(StrEnum):
    """Scheduler state of one appliance coordinator."""

    IDLE = "idle"
    POLLING = "polling"
    BACKED_OFF = "backed_off"


@dataclass(frozen=True, slots=True)
class ApplianceSnapshot:
    """Point-in-time copy of one appliance as returned by the cloud.

    Attributes:
        appliance_id: PNC identifier of the appliance.
        name: Human-readable appliance name.
        twin: Raw device twin, or None when the cloud returned none.

    """

    appliance_id: str
    name: str
    twin: Mapping[str, Any] | None = None

    @property
    def connection_state(self) -> str | None:
        """Return the twin connectivity state, if any."""
        if not self.twin:
            return None
        return self.twin.get("connectionState")

    @property
    def reported(self) -> Mapping[str, Any] | None:
        """Return the reported-properties record, if any."""
        if not self.twin:
            return None
        properties = self.twin.get("properties")
        if not isinstance(properties, Mapping):
            return None
        return properties.get("reported") or None


@dataclass(slots=True)
class PureState:
    """Normalized local state of an air purifier."""

    power: bool
    mode: str | None
    fan_speed: int | None
    light: bool | None = None
    lock: bool | None = None
    ionizer: bool | None = None
    co2: float | int | None = None
    humidity: float | int | None = None
    pm1: float | int | None = None
    pm2_5: float | int | None = None
    pm10: float | int | None = None
    voc: float | int | None = None
    luminance: float | int | None = None
    temperature: float | int | None = None
    filter_life: float | int | None = None


@dataclass(frozen=True, slots=True)
class StatePatch:
    """Desired values for a subset of the writable local fields.

    Every field defaults to UNDEFINED; only fields explicitly given take part
    in the translation to remote commands.
    """

    power: bool | UndefinedType = UNDEFINED
    mode: str | UndefinedType = UNDEFINED
    fan_speed: int | UndefinedType = UNDEFINED
    light: bool | UndefinedType = UNDEFINED
    lock: bool | UndefinedType = UNDEFINED
    ionizer: bool | UndefinedType = UNDEFINED

    def has(self, name: str) -> bool:
        """Return True if the field was given a value."""
        return getattr(self, name) is not UNDEFINED

    def as_dict(self) -> dict[str, Any]:
        """Return only the fields that were given a value."""
        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if self.has(item.name)
        }
