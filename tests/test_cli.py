from datetime import date
from pathlib import Path

import pytest

from shift_calendar.cli.menu import main_menu
from shift_calendar.cli.render import render_day, render_legend, render_month, render_planner
from shift_calendar.logic.shift_view import ShiftView
from shift_calendar.main import main
from shift_calendar.models.shift import Team


@pytest.fixture()
def view() -> ShiftView:
    return ShiftView(Team.A, date(2025, 2, 1), today=date(2025, 2, 10))


def feed(monkeypatch, *answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(it))


def test_render_month(view):
    text = render_month(view)
    assert "Февраль 2025" in text
    assert "Команда A" in text
    assert "Пн" in text and "Вс" in text
    assert "10У*" in text            # today, Monday cursor 15 -> morning
    assert "27В·" in text            # January padding keeps its shift
    assert " 1В·" in text            # March 1, Saturday after an off Friday
    assert "3Н" in text


def test_render_planner(view):
    text = render_planner(view)
    for title in ("Январь 2025", "Февраль 2025", "Март 2025"):
        assert title in text
    assert "10У*" in text            # today in the compact planner
    assert "27В·" not in text        # planner leaves other months' slots empty
    assert render_legend() in text


def test_render_day(view):
    assert render_day(view, date(2025, 1, 27)) == "2025-01-27 (Команда A): Выходной"
    # far past the viewed window: cursor 431 -> index 7
    assert render_day(view, date(2026, 9, 15)) == "2026-09-15 (Команда A): Утро (1)"


def test_menu_navigation_and_team(monkeypatch, capsys, view):
    seen = []
    view.on_team_change = seen.append
    feed(monkeypatch, "2", "4", "x", "b", "0")
    main_menu(view)
    out = capsys.readouterr().out
    assert view.month == date(2025, 3, 1)
    assert view.team is Team.B
    assert seen == [Team.B]
    assert "Ошибка" in out


def test_menu_cancel_returns_to_main(monkeypatch, capsys, view):
    feed(monkeypatch, "3", "отмена", "0")
    main_menu(view)
    assert "Главное меню" in capsys.readouterr().out
    assert view.month == date(2025, 2, 1)


def test_menu_date_query_keeps_viewed_month(monkeypatch, capsys, view):
    feed(monkeypatch, "6", "2026-09-15", "0")
    main_menu(view)
    assert "2026-09-15 (Команда A): Утро (1)" in capsys.readouterr().out
    assert view.month == date(2025, 2, 1)


def test_main_date_query_saves_team(tmp_path: Path, capsys, monkeypatch):
    monkeypatch.delenv("SHIFT_CALENDAR_SATURDAY_POLICY", raising=False)
    rc = main(["--date", "2025-01-27", "--team", "a", "--data-dir", str(tmp_path)])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "2025-01-27 (Команда A): Выходной"
    assert '"A"' in (tmp_path / "preferences.json").read_text(encoding="utf-8")


def test_main_print_uses_saved_team(tmp_path: Path, capsys, monkeypatch):
    monkeypatch.delenv("SHIFT_CALENDAR_SATURDAY_POLICY", raising=False)
    (tmp_path / "preferences.json").write_text('{"selectedTeam": "D"}', encoding="utf-8")
    rc = main(["--print", "--month", "2025-03", "--data-dir", str(tmp_path)])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Март 2025  (Команда D)" in out
    assert "Апрель 2025" in out


def test_main_rejects_bad_input(tmp_path: Path):
    with pytest.raises(SystemExit) as exc:
        main(["--print", "--month", "2025/03", "--data-dir", str(tmp_path)])
    assert exc.value.code == 2
    with pytest.raises(SystemExit):
        main(["--print", "--saturday", "sometimes", "--data-dir", str(tmp_path)])


def test_rejected_command_keeps_saved_team(tmp_path: Path):
    prefs = tmp_path / "preferences.json"
    prefs.write_text('{"selectedTeam": "D"}', encoding="utf-8")
    for argv in (
        ["--print", "--team", "b", "--month", "2025/03"],
        ["--print", "--team", "b", "--saturday", "sometimes"],
        ["--team", "b", "--date", "2025-13-01"],
    ):
        with pytest.raises(SystemExit):
            main(argv + ["--data-dir", str(tmp_path)])
    assert '"D"' in prefs.read_text(encoding="utf-8")
