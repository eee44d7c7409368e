from __future__ import annotations

import logging
from functools import partial

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_PASSWORD, CONF_USERNAME, Platform
from homeassistant.core import HomeAssistant

from .account import AccountSessionRegistry
from .api import create_session_client
from .const import CONF_APPLIANCE_ID, DATA_REGISTRY, DOMAIN
from .coordinator import ElectroluxPureCoordinator

_LOGGER = logging.getLogger(__name__)

PLATFORMS = [Platform.FAN, Platform.SENSOR, Platform.SWITCH]


def get_registry(hass: HomeAssistant) -> AccountSessionRegistry:
    """Return the process-wide account session registry, creating it once."""
    domain_data = hass.data.setdefault(DOMAIN, {})
    registry = domain_data.get(DATA_REGISTRY)
    if registry is None:
        registry = AccountSessionRegistry(partial(create_session_client, hass))
        domain_data[DATA_REGISTRY] = registry
    return registry


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    _LOGGER.info("Setting up Electrolux Pure integration for entry %s", entry.entry_id)

    username = entry.data.get(CONF_USERNAME)
    appliance_id = entry.data.get(CONF_APPLIANCE_ID)

    account = None
    if username:
        account = get_registry(hass).get_or_create(
            username, entry.data.get(CONF_PASSWORD, "")
        )
    else:
        _LOGGER.warning("Entry %s has no account configured", entry.entry_id)

    coordinator = ElectroluxPureCoordinator(hass, entry, account, appliance_id)

    # A cloud outage must not fail the setup; entities stay unavailable until
    # the first successful poll.
    await coordinator.async_refresh()

    hass.data.setdefault(DOMAIN, {})[entry.entry_id] = coordinator
    _LOGGER.debug("Stored coordinator for appliance %s", appliance_id)

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    _LOGGER.info(
        "Successfully setup Electrolux Pure integration for entry %s", entry.entry_id
    )
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    _LOGGER.info("Unloading Electrolux Pure integration for entry %s", entry.entry_id)

    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if unload_ok:
        coordinator = hass.data[DOMAIN].pop(entry.entry_id, None)
        if coordinator is not None:
            await coordinator.async_shutdown()
        _LOGGER.debug("Cleaned up data for entry %s", entry.entry_id)
    else:
        _LOGGER.warning("Failed to unload some platforms for entry %s", entry.entry_id)

    return unload_ok
