"""Sensor entities for Electrolux Pure A9 air quality readings."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorEntityDescription,
    SensorStateClass,
)
from homeassistant.const import (
    CONCENTRATION_MICROGRAMS_PER_CUBIC_METER,
    CONCENTRATION_PARTS_PER_BILLION,
    CONCENTRATION_PARTS_PER_MILLION,
    PERCENTAGE,
    EntityCategory,
    UnitOfTemperature,
)

from .const import DOMAIN
from .entity import ElectroluxPureEntity
from .models import PureState

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.entity_platform import AddEntitiesCallback
    from homeassistant.helpers.typing import StateType

    from .coordinator import ElectroluxPureCoordinator


@dataclass(frozen=True, kw_only=True)
class ElectroluxPureSensorEntityDescription(SensorEntityDescription):
    """Sensor description with an accessor into PureState."""

    value_fn: Callable[[PureState], StateType]


SENSORS: tuple[ElectroluxPureSensorEntityDescription, ...] = (
    ElectroluxPureSensorEntityDescription(
        key="co2",
        device_class=SensorDeviceClass.CO2,
        native_unit_of_measurement=CONCENTRATION_PARTS_PER_MILLION,
        state_class=SensorStateClass.MEASUREMENT,
        value_fn=lambda state: state.co2,
    ),
    ElectroluxPureSensorEntityDescription(
        key="humidity",
        device_class=SensorDeviceClass.HUMIDITY,
        native_unit_of_measurement=PERCENTAGE,
        state_class=SensorStateClass.MEASUREMENT,
        value_fn=lambda state: state.humidity,
    ),
    ElectroluxPureSensorEntityDescription(
        key="pm1",
        device_class=SensorDeviceClass.PM1,
        native_unit_of_measurement=CONCENTRATION_MICROGRAMS_PER_CUBIC_METER,
        state_class=SensorStateClass.MEASUREMENT,
        value_fn=lambda state: state.pm1,
    ),
    ElectroluxPureSensorEntityDescription(
        key="pm2_5",
        device_class=SensorDeviceClass.PM25,
        native_unit_of_measurement=CONCENTRATION_MICROGRAMS_PER_CUBIC_METER,
        state_class=SensorStateClass.MEASUREMENT,
        value_fn=lambda state: state.pm2_5,
    ),
    ElectroluxPureSensorEntityDescription(
        key="pm10",
        device_class=SensorDeviceClass.PM10,
        native_unit_of_measurement=CONCENTRATION_MICROGRAMS_PER_CUBIC_METER,
        state_class=SensorStateClass.MEASUREMENT,
        value_fn=lambda state: state.pm10,
    ),
    ElectroluxPureSensorEntityDescription(
        key="voc",
        device_class=SensorDeviceClass.VOLATILE_ORGANIC_COMPOUNDS_PARTS,
        native_unit_of_measurement=CONCENTRATION_PARTS_PER_BILLION,
        state_class=SensorStateClass.MEASUREMENT,
        value_fn=lambda state: state.voc,
    ),
    # Raw EnvLightLvl reading; its scale is unknown, so no unit is claimed
    ElectroluxPureSensorEntityDescription(
        key="luminance",
        translation_key="luminance",
        state_class=SensorStateClass.MEASUREMENT,
        value_fn=lambda state: state.luminance,
    ),
    ElectroluxPureSensorEntityDescription(
        key="temperature",
        device_class=SensorDeviceClass.TEMPERATURE,
        native_unit_of_measurement=UnitOfTemperature.CELSIUS,
        state_class=SensorStateClass.MEASUREMENT,
        value_fn=lambda state: state.temperature,
    ),
    ElectroluxPureSensorEntityDescription(
        key="filter_life",
        translation_key="filter_life",
        native_unit_of_measurement=PERCENTAGE,
        state_class=SensorStateClass.MEASUREMENT,
        entity_category=EntityCategory.DIAGNOSTIC,
        value_fn=lambda state: state.filter_life,
    ),
)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up sensor entities for an appliance."""
    coordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_entities(
        ElectroluxPureSensorEntity(coordinator, description) for description in SENSORS
    )


class ElectroluxPureSensorEntity(ElectroluxPureEntity, SensorEntity):
    """Read-only measurement reported by the appliance."""

    entity_description: ElectroluxPureSensorEntityDescription

    def __init__(
        self,
        coordinator: ElectroluxPureCoordinator,
        description: ElectroluxPureSensorEntityDescription,
    ) -> None:
        super().__init__(coordinator, description.key)
        self.entity_description = description

    @property
    def native_value(self) -> StateType:
        if self.state_data is None:
            return None
        return self.entity_description.value_fn(self.state_data)
