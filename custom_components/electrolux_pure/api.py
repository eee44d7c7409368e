"""API client for the Electrolux Delta cloud.

This module provides functions to interact with the Electrolux Delta API,
including authentication, appliance listing and command sending.
"""

import logging
from typing import Any

import httpx
from homeassistant.core import HomeAssistant
from homeassistant.helpers.httpx_client import create_async_httpx_client
from httpx_retries import Retry, RetryTransport

from .const import BASE_URL, CLIENT_URL, REQUEST_TIMEOUT, USER_AGENT
from .models import ApplianceSnapshot

_LOGGER = logging.getLogger(__name__)

# HTTP status codes
HTTP_BAD_REQUEST = 400
HTTP_UNAUTHORIZED = 401
HTTP_FORBIDDEN = 403
HTTP_NOT_FOUND = 404


class ElectroluxApiClientError(Exception):
    """Base exception for Electrolux API client errors."""


class ElectroluxApiAuthError(ElectroluxApiClientError):
    """Exception raised for authentication errors."""


def create_headers(token: str | None = None) -> dict[str, str]:
    """Create HTTP headers for Electrolux API requests.

    Args:
        token: Optional bearer token to include in headers.

    Returns:
        Dictionary containing HTTP headers for API requests.

    """
    headers = {
        "content-type": "application/json",
        "accept": "application/json",
        "user-agent": USER_AGENT,
    }
    if token:
        headers["authorization"] = f"Bearer {token}"
    return headers


def is_http_error(status: int) -> bool:
    """Check if HTTP status code indicates an error."""
    return status >= HTTP_BAD_REQUEST


def is_auth_error(status: int) -> bool:
    """Check if HTTP status code indicates an authentication error."""
    return status in (HTTP_UNAUTHORIZED, HTTP_FORBIDDEN)


def validate_response(response: httpx.Response) -> Any:
    """Validate HTTP response and return parsed JSON data.

    Args:
        response: HTTP response object to validate.

    Returns:
        Parsed JSON data from response, or None for an empty body.

    Raises:
        ElectroluxApiAuthError: If authentication error is detected.
        ElectroluxApiClientError: If the request failed or the body is invalid.

    """
    if is_http_error(response.status_code):
        if is_auth_error(response.status_code):
            auth_error = "Authentication error"
            raise ElectroluxApiAuthError(auth_error)
        client_error = f"Request failed: {response.status_code}"
        raise ElectroluxApiClientError(client_error)

    if not response.content:
        return None

    try:
        return response.json()
    except ValueError as err:
        error_msg = f"Invalid JSON in response: {err}"
        raise ElectroluxApiClientError(error_msg) from err


def extract_token(data: Any) -> str:
    """Extract the access token from a client-token or login response.

    Raises:
        ElectroluxApiAuthError: If the response carries no token.

    """
    token = data.get("accessToken") if isinstance(data, dict) else None
    if not token:
        error_msg = "Response did not contain an access token"
        raise ElectroluxApiAuthError(error_msg)
    return token


def extract_appliance_ids(data: Any) -> list[str]:
    """Extract PNC identifiers from the domain appliance listing."""
    if not isinstance(data, list):
        error_msg = "Unexpected appliance list payload"
        raise ElectroluxApiClientError(error_msg)
    if not all(isinstance(item, dict) for item in data):
        error_msg = "Unexpected appliance list entry"
        raise ElectroluxApiClientError(error_msg)
    return [str(item["pncId"]) for item in data if item.get("pncId")]


def extract_appliance(data: Any) -> ApplianceSnapshot:
    """Build an ApplianceSnapshot from a single appliance document.

    Args:
        data: Appliance document as returned by /Appliances/{pncId}.

    Returns:
        Snapshot holding the identifier, display name and raw twin.

    Raises:
        ElectroluxApiClientError: If the document or its twin is not an object.

    """
    if not isinstance(data, dict):
        error_msg = "Unexpected appliance payload"
        raise ElectroluxApiClientError(error_msg)
    twin = data.get("twin")
    if twin is not None and not isinstance(twin, dict):
        error_msg = "Unexpected appliance twin payload"
        raise ElectroluxApiClientError(error_msg)
    appliance_id = str(data.get("pncId", ""))
    appliance_data = data.get("applianceData")
    if not isinstance(appliance_data, dict):
        appliance_data = {}
    name = (
        appliance_data.get("applianceName")
        or data.get("applianceName")
        or appliance_id
    )
    return ApplianceSnapshot(
        appliance_id=appliance_id,
        name=name,
        twin=twin,
    )


def create_session_client(hass: HomeAssistant) -> httpx.AsyncClient:
    """Create HTTP client with retry logic for the Electrolux API.

    Args:
        hass: Home Assistant instance.

    Returns:
        Configured httpx AsyncClient with retry transport.

    """
    base_client = create_async_httpx_client(hass, timeout=REQUEST_TIMEOUT)
    retry = Retry(total=3, backoff_factor=0.5)
    base_client._transport = RetryTransport(  # noqa: SLF001
        transport=base_client._transport,  # noqa: SLF001
        retry=retry,
    )
    return base_client


async def async_get_client_token(session: httpx.AsyncClient) -> str:
    """Fetch the application-level client token required before login."""
    _LOGGER.debug("Fetching Electrolux client token")
    response = await session.get(CLIENT_URL, headers=create_headers())
    return extract_token(validate_response(response))


async def async_authenticate(
    session: httpx.AsyncClient,
    username: str,
    password: str,
) -> str:
    """Authenticate with the Electrolux API using username and password.

    Args:
        session: HTTP client session.
        username: Account username (e-mail address).
        password: Account password.

    Returns:
        Bearer token for subsequent requests.

    Raises:
        ElectroluxApiAuthError: If authentication fails.
        ElectroluxApiClientError: If API request fails.

    """
    client_token = await async_get_client_token(session)

    url = f"{BASE_URL}/Users/Login"
    payload = {"Username": username, "Password": password}

    _LOGGER.debug("Authenticating with Electrolux API")
    response = await session.post(
        url, headers=create_headers(client_token), json=payload
    )
    token = extract_token(validate_response(response))
    _LOGGER.debug("Successfully authenticated with Electrolux API")
    return token


async def async_get_appliance(
    session: httpx.AsyncClient,
    token: str,
    appliance_id: str,
) -> ApplianceSnapshot | None:
    """Fetch one appliance, including its device twin.

    Returns:
        The appliance snapshot, or None if the account does not hold it.

    Raises:
        ElectroluxApiAuthError: If authentication fails.
        ElectroluxApiClientError: If API request fails.

    """
    url = f"{BASE_URL}/Appliances/{appliance_id}"
    response = await session.get(url, headers=create_headers(token))
    if response.status_code == HTTP_NOT_FOUND:
        _LOGGER.debug("Appliance %s not found in account", appliance_id)
        return None
    data = validate_response(response)
    if not data:
        return None
    return extract_appliance(data)


async def async_list_appliances(
    session: httpx.AsyncClient,
    token: str,
) -> list[ApplianceSnapshot]:
    """Fetch every appliance of the account with its device twin.

    Args:
        session: HTTP client session.
        token: Bearer token.

    Returns:
        List of ApplianceSnapshot objects.

    Raises:
        ElectroluxApiAuthError: If authentication fails.
        ElectroluxApiClientError: If API request fails.

    """
    url = f"{BASE_URL}/Domains/Appliances"

    _LOGGER.debug("Fetching appliances from Electrolux API")
    response = await session.get(url, headers=create_headers(token))
    appliance_ids = extract_appliance_ids(validate_response(response))

    appliances = []
    for appliance_id in appliance_ids:
        appliance = await async_get_appliance(session, token, appliance_id)
        if appliance is not None:
            appliances.append(appliance)

    _LOGGER.debug("Retrieved %d appliances from Electrolux API", len(appliances))
    return appliances


async def async_send_command(
    session: httpx.AsyncClient,
    token: str,
    appliance_id: str,
    command: dict[str, Any],
) -> None:
    """Send a desired-property patch to an appliance.

    Args:
        session: HTTP client session.
        token: Bearer token.
        appliance_id: Target appliance identifier.
        command: Property patch, e.g. {"WorkMode": "Auto"}.

    Raises:
        ElectroluxApiAuthError: If authentication fails.
        ElectroluxApiClientError: If API request fails.

    """
    url = f"{BASE_URL}/Appliances/{appliance_id}/Commands"

    _LOGGER.debug("Sending command to appliance %s: %s", appliance_id, command)
    response = await session.put(url, headers=create_headers(token), json=command)
    validate_response(response)
    _LOGGER.debug("Command accepted by appliance %s", appliance_id)
