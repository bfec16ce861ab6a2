from datetime import date

from shift_calendar.logic.shift_view import ShiftView
from shift_calendar.models.shift import SaturdayPolicy, ShiftCode, Team


def make_view(**kw) -> ShiftView:
    kw.setdefault("today", date(2025, 2, 10))
    return ShiftView(kw.pop("team", Team.A), kw.pop("month", date(2025, 2, 14)), **kw)


def test_month_is_normalised_and_defaults_to_today():
    assert make_view().month == date(2025, 2, 1)
    assert ShiftView(Team.A, today=date(2025, 6, 18)).month == date(2025, 6, 1)


def test_navigation_rebuilds_map():
    view = make_view()
    before = view.shifts
    view.next_month()
    assert view.month == date(2025, 3, 1)
    assert view.shifts is not before
    assert date(2025, 7, 1) in view.shifts
    view.prev_month()
    view.prev_month()
    assert view.month == date(2025, 1, 1)


def test_go_to_same_month_keeps_map():
    view = make_view()
    before = view.shifts
    view.go_to(date(2025, 2, 27))
    assert view.shifts is before


def test_set_team_calls_back_only_on_change():
    seen = []
    view = make_view(on_team_change=seen.append)
    view.set_team(Team.A)
    assert seen == []
    view.set_team(Team.C)
    assert seen == [Team.C]
    assert view.team is Team.C
    assert view.shift_for(date(2025, 1, 20)) == 0


def test_earlier_codes_survive_navigation():
    view = make_view()
    jan = {d: view.shift_for(d) for d in view.shifts if d.month == 1}
    for _ in range(6):
        view.next_month()
    assert {d: view.shift_for(d) for d in jan} == jan


def test_month_grid_and_planner():
    view = make_view(month=date(2025, 3, 1))
    grid = view.month_grid()
    assert grid[0][0] == date(2025, 2, 24)
    assert grid[-1][-1] == date(2025, 4, 6)

    planner = view.planner()
    assert [p.month for p in planner] == [date(2025, 2, 1), date(2025, 3, 1), date(2025, 4, 1)]
    assert planner[0].weeks[0][:5] == [None] * 5


def test_today_and_in_month():
    view = make_view()
    assert view.is_today(date(2025, 2, 10))
    assert not view.is_today(date(2025, 2, 11))
    assert ShiftView.in_month(date(2025, 2, 28), date(2025, 2, 1))
    assert not ShiftView.in_month(date(2025, 3, 1), date(2025, 2, 1))


def test_saturday_policy_is_used():
    view = make_view(saturday=SaturdayPolicy.OFF)
    assert view.shift_for(date(2025, 2, 1)) == ShiftCode.OFF
    view = make_view(saturday=SaturdayPolicy.CARRY)
    assert view.shift_for(date(2025, 2, 1)) == ShiftCode.DAY
