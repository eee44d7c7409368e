"""Tests for Electrolux Pure integration setup."""

from collections.abc import Iterator
from unittest.mock import AsyncMock, Mock, patch

import pytest
from homeassistant.const import CONF_PASSWORD, CONF_USERNAME

from custom_components.electrolux_pure import (
    PLATFORMS,
    async_setup_entry,
    async_unload_entry,
    get_registry,
)
from custom_components.electrolux_pure.const import (
    CONF_APPLIANCE_ID,
    DATA_REGISTRY,
    DOMAIN,
)

from .conftest import APPLIANCE_ID, OTHER_APPLIANCE_ID


def _entry(entry_id: str, appliance_id: str, username: str | None) -> Mock:
    entry = Mock()
    entry.entry_id = entry_id
    entry.data = {CONF_APPLIANCE_ID: appliance_id, CONF_PASSWORD: "password123"}
    if username is not None:
        entry.data[CONF_USERNAME] = username
    return entry


@pytest.fixture
def mock_hass() -> Mock:
    """Create a mock Home Assistant instance."""
    hass = Mock()
    hass.data = {}
    hass.config_entries.async_forward_entry_setups = AsyncMock()
    hass.config_entries.async_unload_platforms = AsyncMock(return_value=True)
    return hass


@pytest.fixture
def mock_coordinator_cls() -> Iterator[Mock]:
    """Patch the coordinator class used by the setup."""
    with patch(
        "custom_components.electrolux_pure.ElectroluxPureCoordinator"
    ) as mock_cls, patch(
        "custom_components.electrolux_pure.create_session_client"
    ):
        mock_cls.return_value.async_refresh = AsyncMock()
        mock_cls.return_value.async_shutdown = AsyncMock()
        yield mock_cls


class TestGetRegistry:
    """Tests for get_registry."""

    def test_get_registry_is_created_once(self, mock_hass: Mock) -> None:
        """Test that the registry lives in hass.data and is reused."""
        registry = get_registry(mock_hass)
        assert mock_hass.data[DOMAIN][DATA_REGISTRY] is registry
        assert get_registry(mock_hass) is registry


class TestAsyncSetupEntry:
    """Tests for async_setup_entry."""

    @pytest.mark.asyncio
    async def test_setup_creates_coordinator_and_forwards_platforms(
        self,
        mock_hass: Mock,
        mock_coordinator_cls: Mock,
    ) -> None:
        """Test that setup refreshes the coordinator and forwards platforms."""
        entry = _entry("entry1", APPLIANCE_ID, "user@example.com")

        assert await async_setup_entry(mock_hass, entry) is True

        coordinator = mock_coordinator_cls.return_value
        coordinator.async_refresh.assert_awaited_once()
        assert mock_hass.data[DOMAIN]["entry1"] is coordinator
        mock_hass.config_entries.async_forward_entry_setups.assert_awaited_once_with(
            entry, PLATFORMS
        )

    @pytest.mark.asyncio
    async def test_entries_of_one_account_share_a_session(
        self,
        mock_hass: Mock,
        mock_coordinator_cls: Mock,
    ) -> None:
        """Test that two appliances on one account get the same session."""
        await async_setup_entry(
            mock_hass, _entry("entry1", APPLIANCE_ID, "user@example.com")
        )
        await async_setup_entry(
            mock_hass, _entry("entry2", OTHER_APPLIANCE_ID, "user@example.com")
        )

        first_account = mock_coordinator_cls.call_args_list[0].args[2]
        second_account = mock_coordinator_cls.call_args_list[1].args[2]
        assert first_account is second_account
        assert len(get_registry(mock_hass)) == 1

    @pytest.mark.asyncio
    async def test_setup_without_username_still_succeeds(
        self,
        mock_hass: Mock,
        mock_coordinator_cls: Mock,
    ) -> None:
        """Test that a misconfigured entry sets up with no account."""
        entry = _entry("entry1", APPLIANCE_ID, None)

        assert await async_setup_entry(mock_hass, entry) is True
        assert mock_coordinator_cls.call_args.args[2] is None


class TestAsyncUnloadEntry:
    """Tests for async_unload_entry."""

    @pytest.mark.asyncio
    async def test_unload_shuts_down_coordinator(
        self,
        mock_hass: Mock,
        mock_coordinator_cls: Mock,
    ) -> None:
        """Test that unloading detaches the coordinator."""
        entry = _entry("entry1", APPLIANCE_ID, "user@example.com")
        await async_setup_entry(mock_hass, entry)

        assert await async_unload_entry(mock_hass, entry) is True

        mock_coordinator_cls.return_value.async_shutdown.assert_awaited_once()
        assert "entry1" not in mock_hass.data[DOMAIN]

    @pytest.mark.asyncio
    async def test_failed_unload_keeps_coordinator(
        self,
        mock_hass: Mock,
        mock_coordinator_cls: Mock,
    ) -> None:
        """Test that a failed platform unload leaves the entry data."""
        entry = _entry("entry1", APPLIANCE_ID, "user@example.com")
        await async_setup_entry(mock_hass, entry)
        mock_hass.config_entries.async_unload_platforms.return_value = False

        assert await async_unload_entry(mock_hass, entry) is False
        assert "entry1" in mock_hass.data[DOMAIN]
