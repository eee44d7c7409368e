"""Pytest configuration and fixtures for Electrolux Pure tests."""

from typing import Any
from unittest.mock import Mock

import httpx
import pytest

from custom_components.electrolux_pure.account import (
    AccountSession,
    AccountSessionRegistry,
)
from custom_components.electrolux_pure.models import ApplianceSnapshot

APPLIANCE_ID = "950011538111111115087076"
OTHER_APPLIANCE_ID = "950011538222222225087076"


def create_reported(**overrides: Any) -> dict[str, Any]:
    """Create a reported-properties record of a running purifier.

    Args:
        **overrides: Properties replacing the defaults.

    Returns:
        A dictionary shaped like twin.properties.reported.

    """
    reported = {
        "CO2": 512,
        "Humidity": 41,
        "PM1": 2,
        "PM2_5": 3,
        "PM10": 4,
        "TVOC": 120,
        "EnvLightLvl": 7,
        "Temp": 22,
        "FilterLife": 87,
        "Workmode": "Auto",
        "Fanspeed": 4,
        "Ionizer": True,
        "UILight": False,
        "SafetyLock": False,
    }
    reported.update(overrides)
    return reported


def create_twin(
    connection_state: str = "Connected",
    reported: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Create a device twin with the given connectivity and properties."""
    return {
        "deviceId": APPLIANCE_ID,
        "connectionState": connection_state,
        "properties": {
            "reported": create_reported() if reported is None else reported,
        },
    }


@pytest.fixture
def sample_twin() -> dict[str, Any]:
    """Fixture providing a connected twin with reported properties."""
    return create_twin()


@pytest.fixture
def sample_snapshot(sample_twin: dict[str, Any]) -> ApplianceSnapshot:
    """Fixture providing a reconcilable appliance snapshot."""
    return ApplianceSnapshot(
        appliance_id=APPLIANCE_ID,
        name="Living room",
        twin=sample_twin,
    )


@pytest.fixture
def sample_appliance_response(sample_twin: dict[str, Any]) -> dict[str, Any]:
    """Fixture providing a sample /Appliances/{pncId} API response."""
    return {
        "pncId": APPLIANCE_ID,
        "applianceData": {"applianceName": "Living room", "modelName": "PUREA9"},
        "twin": sample_twin,
    }


@pytest.fixture
def sample_domain_appliances_response() -> list[dict[str, Any]]:
    """Fixture providing a sample /Domains/Appliances API response."""
    return [{"pncId": APPLIANCE_ID, "applianceName": "Living room"}]


@pytest.fixture
def mock_client() -> Mock:
    """Create a mock HTTP client."""
    return Mock(spec=httpx.AsyncClient)


@pytest.fixture
def registry(mock_client: Mock) -> AccountSessionRegistry:
    """Create a fresh account session registry."""
    return AccountSessionRegistry(lambda: mock_client)


@pytest.fixture
def account(registry: AccountSessionRegistry) -> AccountSession:
    """Create the account session used by most coordinator tests."""
    return registry.get_or_create("user@example.com", "password123")
