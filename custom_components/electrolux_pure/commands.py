"""Translation of local state patches into remote property commands."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from .const import (
    CMD_FAN_SPEED,
    CMD_IONIZER,
    CMD_LIGHT,
    CMD_LOCK,
    CMD_WORK_MODE,
    MIN_REMOTE_FAN_SPEED,
    MODE_MANUAL,
    WORK_MODE_AUTO,
    WORK_MODE_MANUAL,
    WORK_MODE_POWER_OFF,
)

if TYPE_CHECKING:
    from .models import StatePatch


def local_to_remote_fan_speed(fan_speed: float) -> int:
    """Map a local 0-100 fan speed onto the remote fan step (at least 1)."""
    return max(MIN_REMOTE_FAN_SPEED, math.floor(fan_speed / 10) - 1)


def _work_mode(mode: Any) -> str:
    return WORK_MODE_MANUAL if mode == MODE_MANUAL else WORK_MODE_AUTO


def build_commands(patch: StatePatch) -> list[dict[str, Any]]:
    """Translate a state patch into the ordered list of remote commands.

    Power and mode share the single WorkMode property: when power is part of
    the patch it decides the work mode (using the patched mode, if any), and
    a mode-only patch gets its own command. A fan speed of zero or less turns
    the appliance off instead of setting a speed.

    Args:
        patch: The local fields to change.

    Returns:
        Property patches to send, in order.

    """
    commands: list[dict[str, Any]] = []

    if patch.has("power"):
        if patch.power:
            mode = patch.mode if patch.has("mode") else None
            commands.append({CMD_WORK_MODE: _work_mode(mode)})
        else:
            commands.append({CMD_WORK_MODE: WORK_MODE_POWER_OFF})
    elif patch.has("mode"):
        commands.append({CMD_WORK_MODE: _work_mode(patch.mode)})

    if patch.has("light"):
        commands.append({CMD_LIGHT: bool(patch.light)})
    if patch.has("lock"):
        commands.append({CMD_LOCK: bool(patch.lock)})
    if patch.has("ionizer"):
        commands.append({CMD_IONIZER: bool(patch.ionizer)})

    if patch.has("fan_speed"):
        if patch.fan_speed <= 0:
            commands.append({CMD_WORK_MODE: WORK_MODE_POWER_OFF})
        else:
            commands.append(
                {
                    CMD_WORK_MODE: WORK_MODE_MANUAL,
                    CMD_FAN_SPEED: local_to_remote_fan_speed(patch.fan_speed),
                }
            )

    return commands
