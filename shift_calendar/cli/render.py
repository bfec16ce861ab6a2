# cli/render.py
from datetime import date
from typing import List, Optional

from shift_calendar.logic.rotation import shift_on
from shift_calendar.logic.shift_view import ShiftView
from shift_calendar.models.shift import ShiftCode
from shift_calendar.utils.date_helper import WEEKDAYS, month_title

CELL = 5           # "20Д* "
COMPACT_CELL = 4   # "20Д*"
PLANNER_WIDTH = COMPACT_CELL * 7


def _mark(view: ShiftView, day: date, month: date) -> str:
    if view.is_today(day):
        return "*"
    return " " if view.in_month(day, month) else "·"


def _cell(view: ShiftView, day: Optional[date], month: date, compact: bool = False) -> str:
    if day is None:
        return " " * (COMPACT_CELL if compact else CELL)
    text = f"{day.day:>2}{view.shift_for(day).tag}{_mark(view, day, month)}"
    return text if compact else text + " "


def render_legend() -> str:
    return "  ".join(f"{code.tag}={code.label}" for code in ShiftCode)


def render_month(view: ShiftView) -> str:
    """
    Main month view: Monday-first weeks, neighbouring months' days marked
    with '·', today with '*'.
    """
    lines: List[str] = []
    title = f"{month_title(view.month)}  (Команда {view.team.value})"
    width = CELL * 7
    lines.append(title.center(width).rstrip())
    lines.append("".join(f"{w:<{CELL}}" for w in WEEKDAYS).rstrip())
    for week in view.month_grid():
        lines.append("".join(_cell(view, d, view.month) for d in week).rstrip())
    lines.append(render_legend())
    return "\n".join(lines)


def render_planner(view: ShiftView) -> str:
    """Three months side by side: previous, current, next."""
    blocks = []
    for pm in view.planner():
        block = [month_title(pm.month).center(PLANNER_WIDTH).rstrip(),
                 "".join(f"{w:<{COMPACT_CELL}}" for w in WEEKDAYS).rstrip()]
        for week in pm.weeks:
            block.append("".join(_cell(view, d, pm.month, compact=True) for d in week))
        blocks.append(block)

    height = max(len(b) for b in blocks)
    lines = []
    for i in range(height):
        row = [(b[i] if i < len(b) else "").ljust(PLANNER_WIDTH) for b in blocks]
        lines.append("   ".join(row).rstrip())
    lines.append(render_legend())
    return "\n".join(lines)


def render_day(view: ShiftView, day: date) -> str:
    # any date, not only the ones inside the viewed window
    code = shift_on(day, view.team, view.saturday)
    return f"{day.isoformat()} (Команда {view.team.value}): {code.label}"
