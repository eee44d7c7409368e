"""Switch entities for the light ring, safety lock and ionizer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from homeassistant.components.switch import SwitchEntity, SwitchEntityDescription
from homeassistant.const import EntityCategory

from .const import DOMAIN
from .entity import ElectroluxPureEntity
from .models import StatePatch

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.entity_platform import AddEntitiesCallback

    from .coordinator import ElectroluxPureCoordinator


@dataclass(frozen=True, kw_only=True)
class ElectroluxPureSwitchEntityDescription(SwitchEntityDescription):
    """Switch description naming the PureState field it toggles."""

    field: str


SWITCHES: tuple[ElectroluxPureSwitchEntityDescription, ...] = (
    ElectroluxPureSwitchEntityDescription(
        key="light",
        translation_key="light",
        field="light",
    ),
    ElectroluxPureSwitchEntityDescription(
        key="lock",
        translation_key="lock",
        field="lock",
        entity_category=EntityCategory.CONFIG,
    ),
    ElectroluxPureSwitchEntityDescription(
        key="ionizer",
        translation_key="ionizer",
        field="ionizer",
    ),
)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up switch entities for an appliance."""
    coordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_entities(
        ElectroluxPureSwitchEntity(coordinator, description)
        for description in SWITCHES
    )


class ElectroluxPureSwitchEntity(ElectroluxPureEntity, SwitchEntity):
    """Boolean appliance setting."""

    entity_description: ElectroluxPureSwitchEntityDescription

    def __init__(
        self,
        coordinator: ElectroluxPureCoordinator,
        description: ElectroluxPureSwitchEntityDescription,
    ) -> None:
        super().__init__(coordinator, description.key)
        self.entity_description = description

    @property
    def is_on(self) -> bool | None:
        if self.state_data is None:
            return None
        return getattr(self.state_data, self.entity_description.field)

    async def async_turn_on(self, **kwargs: Any) -> None:  # noqa: ANN401
        await self._async_apply(StatePatch(**{self.entity_description.field: True}))

    async def async_turn_off(self, **kwargs: Any) -> None:  # noqa: ANN401
        await self._async_apply(StatePatch(**{self.entity_description.field: False}))
