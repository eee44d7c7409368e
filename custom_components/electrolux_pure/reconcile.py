"""Conversion of appliance snapshots into local purifier state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .const import (
    CONNECTION_STATE_CONNECTED,
    UNAVAILABLE_MESSAGES,
    WORK_MODE_REVERSE_MAP,
    UnavailableReason,
)
from .models import PureState

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from .models import ApplianceSnapshot

_LOGGER = logging.getLogger(__name__)


class ApplianceUnavailableError(Exception):
    """Raised when a snapshot cannot be reconciled into local state."""

    def __init__(self, reason: UnavailableReason) -> None:
        super().__init__(UNAVAILABLE_MESSAGES[reason])
        self.reason = reason


def remote_to_local_fan_speed(fan_speed: int) -> int:
    """Map the remote fan step (1-9) onto the local 0-100 scale."""
    return 10 * (int(fan_speed) + 1)


def classify_snapshot(snapshot: ApplianceSnapshot | None) -> UnavailableReason | None:
    """Return why a snapshot is unusable, or None if it can be reconciled.

    Rules are checked in order and the first match wins, so a snapshot
    without a twin is NO_DATA even though it also lacks connectivity info.
    """
    if snapshot is None:
        return UnavailableReason.NOT_IN_ACCOUNT
    if not snapshot.twin:
        return UnavailableReason.NO_DATA
    if snapshot.connection_state != CONNECTION_STATE_CONNECTED:
        return UnavailableReason.DISCONNECTED
    if snapshot.reported is None:
        return UnavailableReason.NO_PROPERTIES
    return None


def reconcile_snapshot(snapshot: ApplianceSnapshot | None) -> PureState:
    """Convert a fetched snapshot into local state.

    Args:
        snapshot: Snapshot of the appliance, or None if it was not listed.

    Returns:
        The reconciled PureState.

    Raises:
        ApplianceUnavailableError: If the snapshot is missing, incomplete or
            reports a disconnected appliance.

    """
    reason = classify_snapshot(snapshot)
    if reason is not None:
        raise ApplianceUnavailableError(reason)

    props = snapshot.reported
    _LOGGER.debug("Reconciling appliance %s: %s", snapshot.appliance_id, props)
    return _state_from_reported(props)


def _state_from_reported(props: Mapping[str, Any]) -> PureState:
    mode = WORK_MODE_REVERSE_MAP.get(props.get("Workmode"))
    if mode is not None:
        power = True
        remote_speed = props.get("Fanspeed")
        fan_speed = (
            None if remote_speed is None else remote_to_local_fan_speed(remote_speed)
        )
    else:
        # PowerOff and any unknown work mode
        power = False
        fan_speed = 0

    return PureState(
        power=power,
        mode=mode,
        fan_speed=fan_speed,
        light=props.get("UILight"),
        lock=props.get("SafetyLock"),
        ionizer=props.get("Ionizer"),
        co2=props.get("CO2"),
        humidity=props.get("Humidity"),
        pm1=props.get("PM1"),
        pm2_5=props.get("PM2_5"),
        pm10=props.get("PM10"),
        voc=props.get("TVOC"),
        # EnvLightLvl scale is unverified, exposed unscaled
        luminance=props.get("EnvLightLvl") or 0,
        temperature=props.get("Temp"),
        filter_life=props.get("FilterLife"),
    )
