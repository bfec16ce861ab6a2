# main.py
import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from shift_calendar.cli.render import render_day, render_month, render_planner
from shift_calendar.config import Settings
from shift_calendar.data.preferences import (
    PreferenceStore, load_selected_team, save_selected_team,
)
from shift_calendar.log import configure_logging
from shift_calendar.logic.shift_view import ShiftView
from shift_calendar.models.shift import parse_saturday_policy, parse_team
from shift_calendar.utils.date_helper import parse_date, parse_month

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="shift-calendar", description="График смен")
    p.add_argument("--cli", action="store_true", help="text menu instead of the window")
    p.add_argument("--print", dest="print_only", action="store_true",
                   help="print the month and the planner, then exit")
    p.add_argument("--team", help="A, B, C or D (also saved as the preferred team)")
    p.add_argument("--month", help="month to open, YYYY-MM")
    p.add_argument("--date", help="print the shift for one date (YYYY-MM-DD) and exit")
    p.add_argument("--saturday", help="Saturday policy: carry, off or rotate")
    p.add_argument("--data-dir", help="directory holding preferences.json")
    p.add_argument("--log-level", help="DEBUG, INFO, WARNING, ...")
    return p


def make_view(args, settings: Settings, today: Optional[date] = None) -> ShiftView:
    """Build the view from flags + settings; the store is read once here."""
    if args.data_dir:
        store = PreferenceStore(Path(args.data_dir).expanduser() / "preferences.json")
    else:
        store = PreferenceStore(settings.preferences_file)

    # every flag parses before anything is written
    chosen = parse_team(args.team) if args.team else None
    month = parse_month(args.month) if args.month else None
    saturday = parse_saturday_policy(args.saturday or settings.SATURDAY_POLICY)

    team = load_selected_team(store, settings.DEFAULT_TEAM)
    if chosen is not None:
        team = chosen
        save_selected_team(store, team)
    log.info("team=%s month=%s saturday=%s", team.value, month, saturday.value)

    return ShiftView(
        team, month, saturday=saturday, today=today,
        on_team_change=lambda t: save_selected_team(store, t),
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = Settings()
    configure_logging(args.log_level or settings.LOG_LEVEL)

    try:
        day = parse_date(args.date) if args.date else None
        view = make_view(args, settings)
    except ValueError as e:
        parser.error(str(e))

    if day is not None:
        print(render_day(view, day))
        return 0
    if args.print_only:
        print(render_month(view))
        print()
        print(render_planner(view))
        return 0
    if args.cli:
        from shift_calendar.cli.menu import main_menu
        main_menu(view)
        return 0

    from shift_calendar.gui.main_window import run_gui
    return run_gui(view)


if __name__ == "__main__":
    sys.exit(main())
