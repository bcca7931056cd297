"""Settings manager — reads/writes settings.ini via configparser."""
from configparser import ConfigParser
from pathlib import Path

from clicker.core.constants import (
    COMMENT_PREFIX,
    KILLSWITCH_TOLERANCE_PX,
    SETTLE_INTERVAL_MS,
    SETTLE_ATTEMPTS,
    SETTLE_TOLERANCE_PX,
    TRACKER_INTERVAL_MS,
    STATUS_POLL_MS,
)


class SettingsManager:
    def __init__(self, ini_path: Path) -> None:
        self.ini_path = ini_path
        self.config = ConfigParser(comment_prefixes=(COMMENT_PREFIX, ";"), inline_comment_prefixes=(COMMENT_PREFIX,))
        if ini_path.exists():
            self.config.read(ini_path, encoding="utf-8")

    # ------------------------------------------------------------------
    # Generic getters
    # ------------------------------------------------------------------
    def get(self, section: str, key: str, fallback: str = "") -> str:
        return self.config.get(section, key, fallback=fallback)

    def getint(self, section: str, key: str, fallback: int = 0) -> int:
        return self.config.getint(section, key, fallback=fallback)

    def getbool(self, section: str, key: str, fallback: bool = False) -> bool:
        return self.config.getboolean(section, key, fallback=fallback)

    def set(self, section: str, key: str, value: str) -> None:
        if not self.config.has_section(section):
            self.config.add_section(section)
        self.config.set(section, key, value)
        self.save()

    def save(self) -> None:
        with open(self.ini_path, "w", encoding="utf-8") as f:
            self.config.write(f)

    # ------------------------------------------------------------------
    # Convenience properties
    # ------------------------------------------------------------------
    @property
    def killswitch_tolerance(self) -> int:
        return self.getint("KILLSWITCH", "tolerance", KILLSWITCH_TOLERANCE_PX)

    @property
    def settle_interval_ms(self) -> int:
        return self.getint("MOVE", "settle_interval_ms", SETTLE_INTERVAL_MS)

    @property
    def settle_attempts(self) -> int:
        return self.getint("MOVE", "settle_attempts", SETTLE_ATTEMPTS)

    @property
    def settle_tolerance(self) -> int:
        return self.getint("MOVE", "settle_tolerance", SETTLE_TOLERANCE_PX)

    @property
    def tracker_interval_ms(self) -> int:
        return self.getint("TRACKER", "interval_ms", TRACKER_INTERVAL_MS)

    @property
    def status_poll_ms(self) -> int:
        return self.getint("PLAYER", "status_poll_ms", STATUS_POLL_MS)

    @property
    def uppercase_script(self) -> bool:
        """Upper-case script text before playing (command words are case-sensitive)."""
        return self.getbool("PLAYER", "uppercase_script", True)
