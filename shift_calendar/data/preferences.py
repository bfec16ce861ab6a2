# data/preferences.py
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict

from shift_calendar.models.shift import Team

log = logging.getLogger(__name__)

SELECTED_TEAM_KEY = "selectedTeam"


class PreferenceStore:
    """
    Small key-value store kept in one JSON file.
    - missing / empty / broken file -> empty store
    - every set() rewrites the whole file (tmp file + replace)
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            raw = self.path.read_text(encoding="utf-8").strip()
            if not raw:
                return {}
            data = json.loads(raw)
        except (OSError, ValueError) as e:
            log.warning("could not read preferences from %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            log.warning("ignoring preferences in %s: not a JSON object", self.path)
            return {}
        return data

    def _save(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(self.path)

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        self._save(data)
        log.debug("saved preference %s=%r", key, value)


def load_selected_team(store: PreferenceStore, default: Team = Team.A) -> Team:
    value = store.get(SELECTED_TEAM_KEY)
    if value is None:
        return default
    try:
        return Team(value)
    except ValueError:
        log.warning("unknown team %r in preferences, using %s", value, default.value)
        return default


def save_selected_team(store: PreferenceStore, team: Team) -> None:
    store.set(SELECTED_TEAM_KEY, team.value)
