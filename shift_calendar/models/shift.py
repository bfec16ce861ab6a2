# models/shift.py
from __future__ import annotations
from datetime import date
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping, Tuple


class ShiftCode(IntEnum):
    OFF = 0
    MORNING = 1
    DAY = 2
    NIGHT = 3

    @property
    def label(self) -> str:
        return SHIFT_NAMES[self]

    @property
    def tag(self) -> str:
        return SHIFT_TAGS[self]


SHIFT_NAMES = ("Выходной", "Утро (1)", "День (2)", "Ночь (3)")
SHIFT_TAGS = ("В", "У", "Д", "Н")     # one-letter tags for the text calendar

# (background, border, text)
SHIFT_COLORS = (
    ("#dcfce7", "#4ade80", "#166534"),
    ("#dbeafe", "#60a5fa", "#1e40af"),
    ("#fef9c3", "#facc15", "#854d0e"),
    ("#fee2e2", "#f87171", "#991b1b"),
)


class Team(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"


class SaturdayPolicy(str, Enum):
    """How Saturday gets its shift code.

    carry  -- same code as the Friday before (default)
    off    -- always a day off
    rotate -- Saturday is a working day and consumes one pattern step
    """
    CARRY = "carry"
    OFF = "off"
    ROTATE = "rotate"


Pattern = Tuple[int, ...]

TEAM_PATTERNS: Mapping[Team, Pattern] = MappingProxyType({
    Team.D: (1, 1, 2, 2, 3, 3, 0, 0),
    Team.A: (2, 2, 3, 3, 0, 0, 1, 1),
    Team.B: (3, 3, 0, 0, 1, 1, 2, 2),
    Team.C: (0, 0, 1, 1, 2, 2, 3, 3),
})

# pattern index 0 (Monday)
REFERENCE_DATE = date(2025, 1, 20)


def parse_team(text: str) -> Team:
    """'a', 'A', ' b ' -> Team. Unknown values raise ValueError."""
    value = (text or "").strip().upper()
    try:
        return Team(value)
    except ValueError:
        choices = ", ".join(t.value for t in Team)
        raise ValueError(f"unknown team {text!r} (expected one of: {choices})") from None


def parse_saturday_policy(text: str) -> SaturdayPolicy:
    value = (text or "").strip().lower()
    try:
        return SaturdayPolicy(value)
    except ValueError:
        choices = ", ".join(p.value for p in SaturdayPolicy)
        raise ValueError(f"unknown Saturday policy {text!r} (expected one of: {choices})") from None
