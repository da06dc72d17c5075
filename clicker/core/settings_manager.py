"""Settings manager — reads/writes settings.ini via configparser.

Only engine tunables and hotkeys live here.  Click interval, options and
position are deliberately not persisted between runs.
"""
from configparser import ConfigParser
from pathlib import Path

from clicker.core.constants import POLL_INTERVAL_S, SETTLE_DELAY_S

DEFAULT_HOTKEYS: dict[str, str] = {
    "start":  "F6",
    "stop":   "F7",
    "toggle": "F8",
}


class SettingsManager:
    def __init__(self, ini_path: Path) -> None:
        self.ini_path = ini_path
        self.config = ConfigParser(comment_prefixes=("#", ";"), inline_comment_prefixes=("#",))
        if ini_path.exists():
            self.config.read(ini_path, encoding="utf-8")

    # ------------------------------------------------------------------
    # Generic getters
    # ------------------------------------------------------------------
    def get(self, section: str, key: str, fallback: str = "") -> str:
        return self.config.get(section, key, fallback=fallback)

    def getint(self, section: str, key: str, fallback: int = 0) -> int:
        return self.config.getint(section, key, fallback=fallback)

    def getfloat(self, section: str, key: str, fallback: float = 0.0) -> float:
        return self.config.getfloat(section, key, fallback=fallback)

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
    def poll_interval(self) -> float:
        """Engine cycle pause in seconds (settings value is in ms)."""
        ms = self.getfloat("ENGINE", "poll_interval_ms", POLL_INTERVAL_S * 1000)
        return max(0.0, ms) / 1000.0

    @property
    def settle_delay(self) -> float:
        """Pause after each synthetic event in seconds (settings value is in ms)."""
        ms = self.getfloat("ENGINE", "settle_delay_ms", SETTLE_DELAY_S * 1000)
        return max(0.0, ms) / 1000.0

    @property
    def hotkeys(self) -> dict[str, str]:
        """Return action→combo mapping from [HOTKEYS], with F6/F7/F8 defaults."""
        return {
            action: self.get("HOTKEYS", action, default)
            for action, default in DEFAULT_HOTKEYS.items()
        }
