"""Tests for clicker.core.settings_manager — defaults and overrides."""
from clicker.core import constants
from clicker.core.settings_manager import SettingsManager


class TestDefaults:
    def test_missing_file_uses_constants(self, settings):
        assert settings.killswitch_tolerance == constants.KILLSWITCH_TOLERANCE_PX
        assert settings.settle_interval_ms == constants.SETTLE_INTERVAL_MS
        assert settings.settle_attempts == constants.SETTLE_ATTEMPTS
        assert settings.settle_tolerance == constants.SETTLE_TOLERANCE_PX
        assert settings.tracker_interval_ms == constants.TRACKER_INTERVAL_MS
        assert settings.status_poll_ms == constants.STATUS_POLL_MS
        assert settings.uppercase_script is True


class TestOverrides:
    def test_read_ini(self, tmp_path):
        ini = tmp_path / "settings.ini"
        ini.write_text(
            "# clicker settings\n"
            "[KILLSWITCH]\n"
            "tolerance = 5   # px\n"
            "[PLAYER]\n"
            "uppercase_script = no\n",
            encoding="utf-8",
        )
        s = SettingsManager(ini)
        assert s.killswitch_tolerance == 5
        assert s.uppercase_script is False

    def test_set_persists(self, tmp_path):
        ini = tmp_path / "settings.ini"
        SettingsManager(ini).set("MOVE", "settle_attempts", "7")
        assert SettingsManager(ini).settle_attempts == 7

    def test_generic_get(self, settings):
        assert settings.get("NOPE", "key", "fallback") == "fallback"
