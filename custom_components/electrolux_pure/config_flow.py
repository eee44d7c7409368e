"""
Configuration flow for Electrolux Pure A9 integration.

This module handles the setup of one appliance per config entry: the
account credentials are validated against the cloud, then the user picks
which appliance of that account the entry manages.
"""

import logging
from typing import Any

import httpx
import voluptuous as vol
from homeassistant.config_entries import ConfigFlow, ConfigFlowResult
from homeassistant.const import CONF_PASSWORD, CONF_USERNAME
from homeassistant.helpers.httpx_client import get_async_client

from . import api
from .const import (
    CONF_APPLIANCE_ID,
    DOMAIN,
    ERROR_API_ERROR,
    ERROR_CANNOT_CONNECT,
    ERROR_INVALID_AUTH,
    ERROR_NO_APPLIANCES,
    ERROR_TIMEOUT,
    ERROR_UNKNOWN,
)

_LOGGER = logging.getLogger(__name__)


class ElectroluxPureConfigFlow(ConfigFlow, domain=DOMAIN):
    """Handle configuration flow for Electrolux Pure integration."""

    VERSION = 1

    def __init__(self) -> None:
        """Initialize the config flow."""
        super().__init__()
        self._credentials: dict[str, str] = {}
        self._appliances: dict[str, str] = {}

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """
        Handle the credentials step of the config flow.

        Args:
            user_input: User input data containing username and password.

        Returns:
            ConfigFlowResult showing the appliance step or errors.

        """
        errors: dict[str, str] = {}

        if user_input is not None:
            username = user_input[CONF_USERNAME]
            password = user_input[CONF_PASSWORD]

            try:
                session = get_async_client(self.hass)
                token = await api.async_authenticate(session, username, password)
                appliances = await api.async_list_appliances(session, token)
                _LOGGER.info("Successfully authenticated with Electrolux API")

            except api.ElectroluxApiAuthError as err:
                _LOGGER.warning(
                    "Authentication failed (%s): %s", ERROR_INVALID_AUTH, err
                )
                errors["base"] = ERROR_INVALID_AUTH
            except httpx.ConnectError:
                _LOGGER.exception("Connection error (%s)", ERROR_CANNOT_CONNECT)
                errors["base"] = ERROR_CANNOT_CONNECT
            except httpx.TimeoutException:
                _LOGGER.exception("Timeout error (%s)", ERROR_TIMEOUT)
                errors["base"] = ERROR_TIMEOUT
            except api.ElectroluxApiClientError:
                _LOGGER.exception("API client error (%s)", ERROR_API_ERROR)
                errors["base"] = ERROR_API_ERROR
            except Exception:
                _LOGGER.exception(
                    "Unexpected error during authentication (%s)",
                    ERROR_UNKNOWN,
                )
                errors["base"] = ERROR_UNKNOWN

            else:
                if not appliances:
                    errors["base"] = ERROR_NO_APPLIANCES
                else:
                    self._credentials = {
                        CONF_USERNAME: username,
                        CONF_PASSWORD: password,
                    }
                    self._appliances = {
                        appliance.appliance_id: appliance.name
                        for appliance in appliances
                    }
                    return await self.async_step_appliance()

        return self.async_show_form(
            step_id="user",
            data_schema=vol.Schema(
                {
                    vol.Required(CONF_USERNAME): str,
                    vol.Required(CONF_PASSWORD): str,
                }
            ),
            errors=errors,
        )

    async def async_step_appliance(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Let the user pick the appliance managed by this entry."""
        if user_input is not None:
            appliance_id = user_input[CONF_APPLIANCE_ID]
            await self.async_set_unique_id(appliance_id)
            self._abort_if_unique_id_configured()

            return self.async_create_entry(
                title=self._appliances.get(appliance_id, appliance_id),
                data={**self._credentials, CONF_APPLIANCE_ID: appliance_id},
            )

        return self.async_show_form(
            step_id="appliance",
            data_schema=vol.Schema(
                {vol.Required(CONF_APPLIANCE_ID): vol.In(self._appliances)}
            ),
        )
