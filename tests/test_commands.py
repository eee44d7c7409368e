"""Tests for state patch to command translation."""

import pytest

from custom_components.electrolux_pure.commands import (
    build_commands,
    local_to_remote_fan_speed,
)
from custom_components.electrolux_pure.models import ApplianceSnapshot, StatePatch
from custom_components.electrolux_pure.reconcile import reconcile_snapshot

from .conftest import APPLIANCE_ID, create_reported, create_twin


class TestBuildCommandsPowerAndMode:
    """Tests for the WorkMode coupling of power and mode."""

    @pytest.mark.parametrize("mode", ["smart", "manual", None])
    def test_power_off_yields_single_power_off_command(
        self, mode: str | None
    ) -> None:
        """Test that power off ignores any mode in the same patch."""
        values = {"power": False}
        if mode is not None:
            values["mode"] = mode
        assert build_commands(StatePatch(**values)) == [{"WorkMode": "PowerOff"}]

    def test_power_on_alone_defaults_to_auto(self) -> None:
        """Test that power on without mode selects Auto."""
        assert build_commands(StatePatch(power=True)) == [{"WorkMode": "Auto"}]

    def test_power_on_with_manual_mode(self) -> None:
        """Test that power on with manual mode selects Manual."""
        commands = build_commands(StatePatch(power=True, mode="manual"))
        assert commands == [{"WorkMode": "Manual"}]

    def test_power_on_with_smart_mode(self) -> None:
        """Test that power on with smart mode selects Auto."""
        commands = build_commands(StatePatch(power=True, mode="smart"))
        assert commands == [{"WorkMode": "Auto"}]

    @pytest.mark.parametrize(("mode", "work_mode"), [("smart", "Auto"), ("manual", "Manual")])
    def test_mode_alone_sets_work_mode(self, mode: str, work_mode: str) -> None:
        """Test that a mode-only patch gets its own WorkMode command."""
        assert build_commands(StatePatch(mode=mode)) == [{"WorkMode": work_mode}]


class TestBuildCommandsToggles:
    """Tests for the boolean toggles."""

    def test_toggles_map_to_remote_keys(self) -> None:
        """Test that light, lock and ionizer each produce one command."""
        commands = build_commands(StatePatch(light=True, lock=False, ionizer=True))
        assert commands == [
            {"LedRingLight": True},
            {"SafetyLock": False},
            {"Ionizer": True},
        ]

    def test_false_values_are_still_sent(self) -> None:
        """Test that presence, not truthiness, selects the fields."""
        assert build_commands(StatePatch(light=False)) == [{"LedRingLight": False}]

    def test_empty_patch_yields_no_commands(self) -> None:
        """Test that an empty patch sends nothing."""
        assert build_commands(StatePatch()) == []


class TestBuildCommandsFanSpeed:
    """Tests for fan speed translation."""

    def test_zero_fan_speed_powers_off(self) -> None:
        """Test that fan speed 0 sends PowerOff without Fanspeed."""
        assert build_commands(StatePatch(fan_speed=0)) == [{"WorkMode": "PowerOff"}]

    def test_negative_fan_speed_powers_off(self) -> None:
        """Test that a negative fan speed also powers off."""
        assert build_commands(StatePatch(fan_speed=-5)) == [{"WorkMode": "PowerOff"}]

    def test_fan_speed_switches_to_manual(self) -> None:
        """Test that 75 becomes Manual with remote step 6."""
        assert build_commands(StatePatch(fan_speed=75)) == [
            {"WorkMode": "Manual", "Fanspeed": 6}
        ]

    def test_low_fan_speed_is_clamped_to_one(self) -> None:
        """Test that speeds below 20 map to the lowest remote step."""
        assert build_commands(StatePatch(fan_speed=5)) == [
            {"WorkMode": "Manual", "Fanspeed": 1}
        ]

    def test_power_and_fan_speed_send_both_commands_in_order(self) -> None:
        """Test that power comes first and fan speed last."""
        commands = build_commands(StatePatch(power=True, fan_speed=40, ionizer=True))
        assert commands == [
            {"WorkMode": "Auto"},
            {"Ionizer": True},
            {"WorkMode": "Manual", "Fanspeed": 3},
        ]


class TestFanSpeedRoundTrip:
    """Tests for the local/remote fan speed mapping."""

    @pytest.mark.parametrize("local", range(0, 101, 10))
    def test_round_trip_within_one_step(self, local: int) -> None:
        """Test that translating and reconciling stays within one step."""
        commands = build_commands(StatePatch(fan_speed=local))
        assert len(commands) == 1
        command = commands[0]

        reported = create_reported(
            Workmode=command["WorkMode"], Fanspeed=command.get("Fanspeed", 0)
        )
        snapshot = ApplianceSnapshot(
            appliance_id=APPLIANCE_ID,
            name="Purifier",
            twin=create_twin(reported=reported),
        )
        state = reconcile_snapshot(snapshot)

        if local == 0:
            assert "Fanspeed" not in command
            assert state.fan_speed == 0
        else:
            assert abs(state.fan_speed - local) <= 10

    @pytest.mark.parametrize(("local", "remote"), [(20, 1), (50, 4), (100, 9), (75, 6)])
    def test_local_to_remote(self, local: int, remote: int) -> None:
        """Test that remote = floor(local / 10) - 1."""
        assert local_to_remote_fan_speed(local) == remote
