"""Coordinator for Electrolux Pure A9 integration."""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import timedelta
from typing import TYPE_CHECKING

import httpx
from homeassistant.core import callback
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed

from . import api
from .commands import build_commands
from .const import (
    BACKOFF_POLL_COUNT,
    DEFAULT_POLL_INTERVAL,
    DOMAIN,
    POLL_AMORTIZE_FACTOR,
    REFRESH_DELAY,
    UNAVAILABLE_MESSAGES,
    UnavailableReason,
)
from .models import PollState, PureState, StatePatch
from .reconcile import ApplianceUnavailableError, reconcile_snapshot

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant

    from .account import AccountSession

_LOGGER = logging.getLogger(__name__)


class ElectroluxPureCoordinator(DataUpdateCoordinator[PureState | None]):
    """Coordinator that polls one appliance through its shared account session.

    Each refresh is one scheduler tick. Ticks of the same coordinator never
    overlap, and the fetch decision for an account is taken under the
    account session lock, so appliances on one account share a single list
    fetch per half poll interval and a single back-off window.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        config_entry: ConfigEntry,
        account: AccountSession | None,
        appliance_id: str | None,
    ) -> None:
        """Initialize the coordinator."""
        super().__init__(
            hass,
            _LOGGER,
            config_entry=config_entry,
            name=f"{DOMAIN}_{appliance_id}",
            update_interval=timedelta(seconds=DEFAULT_POLL_INTERVAL),
        )
        self.account = account
        self.appliance_id = appliance_id
        self.poll_state = PollState.IDLE
        self.unavailable_reason: UnavailableReason | None = None
        self.detached = False
        self._tick_lock = asyncio.Lock()
        self._poll_task: asyncio.Task[None] | None = None
        self.data = None

    @property
    def poll_interval(self) -> float:
        """Return the scheduled tick interval in seconds."""
        return self.update_interval.total_seconds()

    async def _async_update_data(self) -> PureState | None:
        if self.detached:
            _LOGGER.debug("Appliance %s is detached, skipping poll", self.appliance_id)
            return self._skipped_tick()

        if not self.appliance_id:
            _LOGGER.debug("No appliance id configured, skipping poll")
            return self._skipped_tick()

        if self.account is None or not self.account.username:
            _LOGGER.debug("Appliance %s is not configured", self.appliance_id)
            return self._skipped_tick()

        async with self._tick_lock:
            _LOGGER.debug("Polling for appliance %s", self.appliance_id)
            if not await self._async_refresh_account():
                return self._skipped_tick()
            return self._reconcile()

    def _skipped_tick(self) -> PureState | None:
        """Keep the current data, or the current unavailability, unchanged.

        Raises:
            UpdateFailed: If the appliance is still marked unavailable.

        """
        if self.unavailable_reason is not None:
            raise UpdateFailed(UNAVAILABLE_MESSAGES[self.unavailable_reason])
        return self.data

    async def _async_refresh_account(self) -> bool:
        """Fetch the account appliance list when due.

        Returns:
            True if a cached appliance list is available for reconciliation.

        """
        session = self.account
        backoff_window = self.poll_interval * BACKOFF_POLL_COUNT
        fetch_window = self.poll_interval * POLL_AMORTIZE_FACTOR

        async with session.lock:
            now = time.time()
            if now - session.fail_time < backoff_window:
                self.poll_state = PollState.BACKED_OFF
                _LOGGER.debug(
                    "Account %s in failure back-off status", session.username
                )
                return False

            if now - session.last_poll_time > fetch_window:
                self.poll_state = PollState.POLLING
                _LOGGER.debug(
                    "Will poll account %s for appliance status", session.username
                )
                try:
                    appliances = await session.async_list_appliances()
                except (api.ElectroluxApiClientError, httpx.HTTPError) as err:
                    session.fail_time = now
                    self.poll_state = PollState.BACKED_OFF
                    _LOGGER.warning(
                        "Error fetching appliances for account %s: %s",
                        session.username,
                        err,
                    )
                    return False
                session.appliances = appliances
                session.last_poll_time = now

            self.poll_state = PollState.IDLE
            return session.appliances is not None

    def _reconcile(self) -> PureState:
        snapshot = self.account.get_appliance(self.appliance_id)
        try:
            state = reconcile_snapshot(snapshot)
        except ApplianceUnavailableError as err:
            self.unavailable_reason = err.reason
            _LOGGER.info(
                "Appliance %s is unavailable (%s)", self.appliance_id, err.reason
            )
            raise UpdateFailed(str(err)) from err

        self.unavailable_reason = None
        return state

    @callback
    def async_request_poll(self) -> None:
        """Schedule one extra tick shortly, replacing a still-pending one."""
        if self._poll_task is not None and not self._poll_task.done():
            self._poll_task.cancel()
        self._poll_task = asyncio.create_task(self._async_delayed_poll())

    async def _async_delayed_poll(self) -> None:
        await asyncio.sleep(REFRESH_DELAY)
        # A running refresh is no longer pending and must not be cancelled.
        self._poll_task = None
        await self.async_refresh()

    async def async_apply_patch(self, patch: StatePatch) -> None:
        """Send the commands for a state patch, then request a re-poll.

        Commands are sent in order and the batch stops at the first failure.
        Commands already accepted by the cloud are not rolled back; the
        re-poll is requested either way so the local state follows what the
        appliance actually applied.

        Raises:
            HomeAssistantError: If the appliance is not configured or a
                command could not be sent.

        """
        if not self.appliance_id or self.account is None:
            error_msg = "Appliance is not configured"
            raise HomeAssistantError(error_msg)

        commands = build_commands(patch)
        _LOGGER.debug(
            "Setting %s on appliance %s", patch.as_dict(), self.appliance_id
        )

        try:
            async with self.account.lock:
                for command in commands:
                    await self.account.async_send_command(self.appliance_id, command)
        except (api.ElectroluxApiClientError, httpx.HTTPError) as err:
            error_msg = f"Failed to send command to {self.appliance_id}: {err}"
            raise HomeAssistantError(error_msg) from err
        finally:
            self.async_request_poll()

    async def async_shutdown(self) -> None:
        """Stop polling this appliance; a pending re-poll is cancelled."""
        self.detached = True
        if self._poll_task is not None:
            self._poll_task.cancel()
            self._poll_task = None
        await super().async_shutdown()
