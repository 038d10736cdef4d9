from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Callable, List, Optional
from monsterbattle.core.logging import logger, LEVELS

SETTINGS_FILENAME = ".monster_battle_settings.json"

@dataclass
class SettingsData:
    log_level: str = "INFO"          # DEBUG / INFO / WARN / ERROR
    debug: bool = False              # Verbose engine logging during play
    menu_color: str = "bright_white"  # rich colour for menu titles and pointer
    log_lines: int = 8               # battle log entries shown in the HUD
    seed: Optional[int] = None       # fixed RNG seed for reproducible battles

    def normalize(self):
        if self.log_level not in LEVELS:
            self.log_level = "INFO"
        if not isinstance(self.log_lines, int) or not 1 <= self.log_lines <= 50:
            self.log_lines = 8
        if self.seed is not None and not isinstance(self.seed, int):
            self.seed = None
        if not isinstance(self.menu_color, str) or not self.menu_color:
            self.menu_color = "bright_white"
        self.debug = bool(self.debug)

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path
        self._listeners: List[Callable[[SettingsData], None]] = []

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls) -> "Settings":
        path = cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                # Backfill missing fields
                field_names = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in field_names})
                data.normalize()
                logger.debug("SettingsLoaded", path=str(path))
                return cls(data, path)
            except (OSError, ValueError, TypeError, AttributeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
        data = SettingsData()
        data.normalize()
        return cls(data, path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", error=str(e))

    def on_change(self, fn: Callable[[SettingsData], None]):
        self._listeners.append(fn)

    def notify(self):
        for fn in self._listeners:
            fn(self.data)

    def apply_log_level(self):
        """Push the configured level to the global logger.

        Without ``debug`` the INFO chatter is hidden behind WARN.
        """
        lvl = self.data.log_level
        if not self.data.debug and lvl in {"INFO","DEBUG"}:
            lvl = "WARN"
        logger.set_level(lvl)  # type: ignore[arg-type]
