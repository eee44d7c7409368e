"""Fan entity for Electrolux Pure A9 air purifiers.

Power, fan speed and operating mode share the appliance's single work mode
property, so they are exposed together as one fan entity: the fan speed is
the percentage and the operating mode is the preset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from homeassistant.components.fan import FanEntity, FanEntityFeature

from .const import DOMAIN, FAN_SPEED_COUNT, PRESET_MODES
from .entity import ElectroluxPureEntity
from .models import StatePatch

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.entity_platform import AddEntitiesCallback

    from .coordinator import ElectroluxPureCoordinator


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the purifier fan entity."""
    coordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_entities([ElectroluxPureFanEntity(coordinator)])


class ElectroluxPureFanEntity(ElectroluxPureEntity, FanEntity):
    """Purifier fan: power, fan speed and smart/manual mode."""

    _attr_name = None
    _attr_translation_key = "purifier"
    _attr_preset_modes = PRESET_MODES
    _attr_speed_count = FAN_SPEED_COUNT
    _attr_supported_features = (
        FanEntityFeature.SET_SPEED
        | FanEntityFeature.PRESET_MODE
        | FanEntityFeature.TURN_ON
        | FanEntityFeature.TURN_OFF
    )

    def __init__(self, coordinator: ElectroluxPureCoordinator) -> None:
        super().__init__(coordinator, "fan")

    @property
    def is_on(self) -> bool | None:
        """Return True if the purifier is powered."""
        if self.state_data is None:
            return None
        return self.state_data.power

    @property
    def percentage(self) -> int | None:
        """Return the fan speed on the 0-100 scale."""
        if self.state_data is None:
            return None
        return self.state_data.fan_speed

    @property
    def preset_mode(self) -> str | None:
        """Return the operating mode (smart or manual) while powered."""
        if self.state_data is None:
            return None
        return self.state_data.mode

    async def async_turn_on(
        self,
        percentage: int | None = None,
        preset_mode: str | None = None,
        **kwargs: Any,  # noqa: ANN401
    ) -> None:
        """Turn the purifier on, optionally with a speed or mode."""
        values: dict[str, Any] = {"power": True}
        if preset_mode is not None:
            values["mode"] = preset_mode
        if percentage is not None:
            values["fan_speed"] = percentage
        await self._async_apply(StatePatch(**values))

    async def async_turn_off(self, **kwargs: Any) -> None:  # noqa: ANN401
        """Turn the purifier off."""
        await self._async_apply(StatePatch(power=False))

    async def async_set_percentage(self, percentage: int) -> None:
        """Set the fan speed; zero turns the purifier off."""
        await self._async_apply(StatePatch(fan_speed=percentage))

    async def async_set_preset_mode(self, preset_mode: str) -> None:
        """Switch between smart and manual mode."""
        await self._async_apply(StatePatch(mode=preset_mode))
