# utils/date_helper.py
import calendar
from datetime import date, datetime
from typing import List, Optional

MONTH_NAMES = (
    "Январь", "Февраль", "Март", "Апрель", "Май", "Июнь",
    "Июль", "Август", "Сентябрь", "Октябрь", "Ноябрь", "Декабрь",
)
WEEKDAYS = ("Пн", "Вт", "Ср", "Чт", "Пт", "Сб", "Вс")

SATURDAY = 5
SUNDAY = 6


def add_months(day: date, months: int) -> date:
    """
    Calendar month arithmetic.
    - the day is clamped to the length of the target month
    - e.g. 2025-01-31 + 1 -> 2025-02-28
    """
    total = day.year * 12 + (day.month - 1) + months
    year, month = divmod(total, 12)
    month += 1
    last = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last))


def month_start(day: date) -> date:
    return day.replace(day=1)


def month_title(day: date) -> str:
    return f"{MONTH_NAMES[day.month - 1]} {day.year}"


def month_weeks(year: int, month: int) -> List[List[date]]:
    """
    Monday-first weeks covering the month, padded with the neighbouring
    months' days so every week has 7 dates.
    """
    cal = calendar.Calendar(firstweekday=0)  # Monday
    return cal.monthdatescalendar(year, month)


def month_weeks_sparse(year: int, month: int) -> List[List[Optional[date]]]:
    """Same layout as month_weeks, but days outside the month are None."""
    return [
        [d if d.month == month else None for d in week]
        for week in month_weeks(year, month)
    ]


def parse_date(text: str) -> date:
    try:
        return datetime.strptime(text.strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValueError(f"invalid date {text!r} (expected YYYY-MM-DD)") from None


def parse_month(text: str) -> date:
    """'2025-03' -> date(2025, 3, 1)"""
    try:
        return datetime.strptime(text.strip(), "%Y-%m").date()
    except ValueError:
        raise ValueError(f"invalid month {text!r} (expected YYYY-MM)") from None
