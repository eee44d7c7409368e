"""Account sessions shared by every appliance of one Electrolux account."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from . import api

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    import httpx

    from .models import ApplianceSnapshot

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")


class AccountSession:
    """Authenticated API session plus polling bookkeeping for one account.

    The lock serializes every read and write of the polling bookkeeping and
    every network call, so coordinators sharing the session never issue
    overlapping requests.
    """

    def __init__(
        self,
        username: str,
        password: str,
        client: httpx.AsyncClient,
    ) -> None:
        """Attach credentials; no network call is made here."""
        self.username = username
        self._password = password
        self.client = client
        self._token: str | None = None
        self.last_poll_time = 0.0
        self.fail_time = 0.0
        self.appliances: list[ApplianceSnapshot] | None = None
        self.lock = asyncio.Lock()

    @property
    def authenticated(self) -> bool:
        """Return True if a bearer token is cached."""
        return self._token is not None

    def update_credentials(self, password: str) -> None:
        """Replace the stored password and drop the cached token."""
        if password == self._password:
            return
        _LOGGER.info("Credentials changed for account %s", self.username)
        self._password = password
        self._token = None

    def get_appliance(self, appliance_id: str) -> ApplianceSnapshot | None:
        """Look up an appliance in the cached list."""
        for appliance in self.appliances or []:
            if appliance.appliance_id == appliance_id:
                return appliance
        return None

    async def _async_login(self) -> str:
        _LOGGER.debug("Logging in to Electrolux account %s", self.username)
        self._token = await api.async_authenticate(
            self.client, self.username, self._password
        )
        return self._token

    async def _async_call(
        self,
        func: Callable[..., Awaitable[_T]],
        *args: Any,
    ) -> _T:
        """Run an API call, logging in first and once more on a stale token."""
        token = self._token
        if token is None:
            return await func(self.client, await self._async_login(), *args)

        try:
            return await func(self.client, token, *args)
        except api.ElectroluxApiAuthError:
            _LOGGER.debug(
                "Token rejected for account %s, logging in again", self.username
            )
            self._token = None
            return await func(self.client, await self._async_login(), *args)

    async def async_list_appliances(self) -> list[ApplianceSnapshot]:
        """Fetch all appliances of the account."""
        return await self._async_call(api.async_list_appliances)

    async def async_get_appliance(
        self, appliance_id: str
    ) -> ApplianceSnapshot | None:
        """Fetch a single appliance of the account."""
        return await self._async_call(api.async_get_appliance, appliance_id)

    async def async_send_command(
        self, appliance_id: str, command: dict[str, Any]
    ) -> None:
        """Send a desired-property patch to one appliance."""
        await self._async_call(api.async_send_command, appliance_id, command)


class AccountSessionRegistry:
    """Registry mapping account usernames to their shared session.

    Sessions are created on first lookup and kept for the lifetime of the
    registry.
    """

    def __init__(self, client_factory: Callable[[], httpx.AsyncClient]) -> None:
        self._client_factory = client_factory
        self._sessions: dict[str, AccountSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, username: object) -> bool:
        return username in self._sessions

    def get_or_create(self, username: str, password: str) -> AccountSession:
        """Return the session for an account, creating it on first use."""
        session = self._sessions.get(username)
        if session is None:
            _LOGGER.info("Creating new API session for account %s", username)
            session = AccountSession(username, password, self._client_factory())
            self._sessions[username] = session
        else:
            session.update_credentials(password)
        return session
