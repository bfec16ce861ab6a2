# logic/shift_view.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional

from shift_calendar.logic.rotation import ShiftMap, build_team_map, get_shift_for_date
from shift_calendar.models.shift import SaturdayPolicy, ShiftCode, Team
from shift_calendar.utils.date_helper import (
    add_months, month_start, month_weeks, month_weeks_sparse,
)

# previous, current, next
PLANNER_OFFSETS = (-1, 0, 1)


@dataclass(frozen=True)
class PlannerMonth:
    month: date                           # first day of the month
    weeks: List[List[Optional[date]]]     # Monday-first, None outside the month


class ShiftView:
    """
    Viewed month + selected team, and the shift map for them.

    The map covers the reference date through the viewed month + 4 months.
    It is thrown away whenever the month or the team changes and rebuilt on
    the next read.
    """

    def __init__(self, team: Team, month: Optional[date] = None,
                 saturday: SaturdayPolicy = SaturdayPolicy.CARRY,
                 today: Optional[date] = None,
                 on_team_change: Optional[Callable[[Team], None]] = None):
        self._today = today
        self._team = team
        self._month = month_start(month or self.today)
        self.saturday = saturday
        self.on_team_change = on_team_change
        self._shifts: Optional[ShiftMap] = None

    # ---------------- state ----------------
    @property
    def today(self) -> date:
        return self._today or date.today()

    @property
    def team(self) -> Team:
        return self._team

    @property
    def month(self) -> date:
        return self._month

    @property
    def shifts(self) -> ShiftMap:
        if self._shifts is None:
            self._shifts = build_team_map(self._team, self._month, self.saturday)
        return self._shifts

    def set_team(self, team: Team) -> None:
        if team == self._team:
            return
        self._team = team
        self._shifts = None
        if self.on_team_change:
            self.on_team_change(team)

    def go_to(self, month: date) -> None:
        month = month_start(month)
        if month != self._month:
            self._month = month
            self._shifts = None

    def prev_month(self) -> None:
        self.go_to(add_months(self._month, -1))

    def next_month(self) -> None:
        self.go_to(add_months(self._month, 1))

    # ---------------- queries ----------------
    def shift_for(self, day: date) -> ShiftCode:
        return get_shift_for_date(day, self.shifts)

    def is_today(self, day: date) -> bool:
        return day == self.today

    @staticmethod
    def in_month(day: date, month: date) -> bool:
        return (day.year, day.month) == (month.year, month.month)

    def month_grid(self) -> List[List[date]]:
        return month_weeks(self._month.year, self._month.month)

    def planner(self) -> List[PlannerMonth]:
        out = []
        for offset in PLANNER_OFFSETS:
            m = add_months(self._month, offset)
            out.append(PlannerMonth(m, month_weeks_sparse(m.year, m.month)))
        return out

