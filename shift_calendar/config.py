# config.py
# Settings read from the environment; command-line flags override them.
import os
from pathlib import Path

from shift_calendar.models.shift import Team


class Settings:
    """Settings loaded from environment variables."""

    def __init__(self, environ=None):
        env = os.environ if environ is None else environ
        self.DATA_DIR: Path = Path(
            env.get("SHIFT_CALENDAR_DATA_DIR", str(Path.home() / ".shift_calendar"))
        ).expanduser()
        self.LOG_LEVEL: str = env.get("SHIFT_CALENDAR_LOG_LEVEL", "WARNING").upper()
        self.SATURDAY_POLICY: str = env.get("SHIFT_CALENDAR_SATURDAY_POLICY", "carry")
        self.DEFAULT_TEAM: Team = Team.A

    @property
    def preferences_file(self) -> Path:
        return self.DATA_DIR / "preferences.json"

