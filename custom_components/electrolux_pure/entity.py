"""Base entity for Electrolux Pure A9 appliances."""

from __future__ import annotations

from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import DOMAIN
from .coordinator import ElectroluxPureCoordinator
from .models import PureState, StatePatch


class ElectroluxPureEntity(CoordinatorEntity[ElectroluxPureCoordinator]):
    """Entity backed by the coordinator of one appliance."""

    _attr_has_entity_name = True

    def __init__(self, coordinator: ElectroluxPureCoordinator, key: str) -> None:
        super().__init__(coordinator)
        appliance_id = coordinator.appliance_id
        self._attr_unique_id = f"{appliance_id}_{key}"
        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, appliance_id)},
            manufacturer="Electrolux",
            model="Pure A9",
            name=coordinator.config_entry.title,
        )

    @property
    def state_data(self) -> PureState | None:
        """Return the last reconciled state of the appliance."""
        return self.coordinator.data

    @property
    def available(self) -> bool:
        """Return True if the appliance was reconciled successfully."""
        return super().available and self.coordinator.data is not None

    async def _async_apply(self, patch: StatePatch) -> None:
        await self.coordinator.async_apply_patch(patch)
