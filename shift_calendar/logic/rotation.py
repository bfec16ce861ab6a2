# logic/rotation.py
from datetime import date, timedelta
from typing import Dict, Sequence, Tuple

from shift_calendar.models.shift import (
    REFERENCE_DATE, TEAM_PATTERNS, SaturdayPolicy, ShiftCode, Team,
)
from shift_calendar.utils.date_helper import SATURDAY, SUNDAY, add_months

ShiftMap = Dict[date, ShiftCode]

# the window always reaches this many months past the viewed month
WINDOW_MONTHS_AHEAD = 4


def _advancing_weekdays(saturday: SaturdayPolicy) -> Tuple[int, ...]:
    # 0=Mon ... 6=Sun
    if saturday is SaturdayPolicy.ROTATE:
        return (0, 1, 2, 3, 4, SATURDAY)
    return (0, 1, 2, 3, 4)


def compute_shifts_map(start: date, end: date, pattern: Sequence[int],
                       saturday: SaturdayPolicy = SaturdayPolicy.CARRY) -> ShiftMap:
    """
    Walk start..end (inclusive) one day at a time.
    - working days: pattern[cursor % len(pattern)], then cursor += 1
    - Sunday: copies the Friday before (date - 2), off if that Friday is not in the map
    - Saturday: depends on `saturday`
        carry  -> copies Friday (date - 1), off if missing
        off    -> off
        rotate -> treated as a working day
    end < start gives an empty map.
    """
    advancing = _advancing_weekdays(saturday)
    shifts: ShiftMap = {}
    cursor = 0
    cur = start
    one_day = timedelta(days=1)

    while cur <= end:
        weekday = cur.weekday()
        if weekday in advancing:
            shifts[cur] = ShiftCode(pattern[cursor % len(pattern)])
            cursor += 1
        elif weekday == SUNDAY:
            shifts[cur] = shifts.get(cur - timedelta(days=2), ShiftCode.OFF)
        elif saturday is SaturdayPolicy.CARRY:
            shifts[cur] = shifts.get(cur - one_day, ShiftCode.OFF)
        else:
            shifts[cur] = ShiftCode.OFF
        cur += one_day

    return shifts


def get_shift_for_date(day: date, shifts: ShiftMap) -> ShiftCode:
    return shifts.get(day, ShiftCode.OFF)


def build_window(anchor_month: date) -> Tuple[date, date]:
    """(reference date, anchor_month + 4 months)"""
    return REFERENCE_DATE, add_months(anchor_month, WINDOW_MONTHS_AHEAD)


def build_team_map(team: Team, anchor_month: date,
                   saturday: SaturdayPolicy = SaturdayPolicy.CARRY) -> ShiftMap:
    start, end = build_window(anchor_month)
    return compute_shifts_map(start, end, TEAM_PATTERNS[team], saturday)


def _cursor_at(start: date, day: date, advancing: Tuple[int, ...]) -> int:
    """Number of cursor steps taken on start..day-1."""
    weeks, rem = divmod((day - start).days, 7)
    steps = weeks * len(advancing)
    first = start.weekday()
    steps += sum(1 for k in range(rem) if (first + k) % 7 in advancing)
    return steps


def shift_on(day: date, team: Team,
             saturday: SaturdayPolicy = SaturdayPolicy.CARRY,
             start: date = REFERENCE_DATE) -> ShiftCode:
    """
    Shift code of `day` without building a map.
    Equals compute_shifts_map(start, day, ...)[day]; dates before `start` are off.
    """
    if day < start:
        return ShiftCode.OFF

    weekday = day.weekday()
    advancing = _advancing_weekdays(saturday)
    if weekday == SUNDAY:
        return shift_on(day - timedelta(days=2), team, saturday, start)
    if weekday == SATURDAY and weekday not in advancing:
        if saturday is SaturdayPolicy.OFF:
            return ShiftCode.OFF
        return shift_on(day - timedelta(days=1), team, saturday, start)

    pattern = TEAM_PATTERNS[team]
    return ShiftCode(pattern[_cursor_at(start, day, advancing) % len(pattern)])
