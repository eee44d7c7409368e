"""Constants for Electrolux Pure A9 integration.

This module contains all the constants used throughout the integration,
including API endpoints, polling cadence, configuration keys and the
remote property names of the appliance twin.
"""

from enum import StrEnum

DOMAIN = "electrolux_pure"

BASE_URL = "https://api.delta.electrolux.com/api"
CLIENT_URL = "https://electrolux-wellbeing-client.vercel.app/api/mu52m5PR9X"
USER_AGENT = "ElectroluxPure/1.0 (Home Assistant)"

DEFAULT_POLL_INTERVAL = 60  # Seconds between scheduled ticks
BACKOFF_POLL_COUNT = 15  # Intervals to wait after a failed list fetch
POLL_AMORTIZE_FACTOR = 0.5  # Share one list fetch per half interval
REFRESH_DELAY = 0.5  # Seconds before the re-poll that follows a command
REQUEST_TIMEOUT = 10.0

CONF_APPLIANCE_ID = "appliance_id"

DATA_REGISTRY = "registry"

ERROR_INVALID_AUTH = "invalid_auth"
ERROR_CANNOT_CONNECT = "cannot_connect"
ERROR_TIMEOUT = "timeout_error"
ERROR_API_ERROR = "api_error"
ERROR_UNKNOWN = "unknown_error"
ERROR_NO_APPLIANCES = "no_appliances"

CONNECTION_STATE_CONNECTED = "Connected"

# Desired-property keys accepted by the command endpoint
CMD_WORK_MODE = "WorkMode"
CMD_FAN_SPEED = "Fanspeed"
CMD_LIGHT = "LedRingLight"
CMD_LOCK = "SafetyLock"
CMD_IONIZER = "Ionizer"

WORK_MODE_AUTO = "Auto"
WORK_MODE_MANUAL = "Manual"
WORK_MODE_POWER_OFF = "PowerOff"

MODE_SMART = "smart"
MODE_MANUAL = "manual"
PRESET_MODES = [MODE_SMART, MODE_MANUAL]

WORK_MODE_MAP = {
    MODE_SMART: WORK_MODE_AUTO,
    MODE_MANUAL: WORK_MODE_MANUAL,
}
WORK_MODE_REVERSE_MAP = {value: key for key, value in WORK_MODE_MAP.items()}

FAN_SPEED_COUNT = 10
MIN_REMOTE_FAN_SPEED = 1


class UnavailableReason(StrEnum):
    """Why an appliance snapshot could not be turned into local state."""

    NOT_IN_ACCOUNT = "not_in_account"
    NO_DATA = "no_data"
    DISCONNECTED = "disconnected"
    NO_PROPERTIES = "no_properties"


UNAVAILABLE_MESSAGES = {
    UnavailableReason.NOT_IN_ACCOUNT: (
        "Device no longer in account. Check the mobile app and verify that "
        "you use the correct account."
    ),
    UnavailableReason.NO_DATA: "Device has no data. Check for service outages.",
    UnavailableReason.DISCONNECTED: (
        "Device is not connected. Check device power and Wi-Fi connectivity."
    ),
    UnavailableReason.NO_PROPERTIES: (
        "Device has no properties data. Check for service outages."
    ),
}
