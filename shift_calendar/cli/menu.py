# cli/menu.py
from shift_calendar.cli.render import render_day, render_month, render_planner
from shift_calendar.exceptions import CancelAction, GoBackAction
from shift_calendar.logic.shift_view import ShiftView
from shift_calendar.models.shift import Team, parse_team
from shift_calendar.utils.date_helper import parse_date, parse_month
from shift_calendar.utils.input_handler import get_input


def main_menu(view: ShiftView):
    print(render_month(view))
    while True:
        print("\n[График смен]")
        print("1. Предыдущий месяц")
        print("2. Следующий месяц")
        print("3. Перейти к месяцу")
        print("4. Выбрать команду")
        print("5. Планировщик (3 месяца)")
        print("6. Смена на дату")
        print("0. Выход")

        try:
            choice = get_input("Выбор")
            if choice == "1":
                view.prev_month()
                print(render_month(view))
            elif choice == "2":
                view.next_month()
                print(render_month(view))
            elif choice == "3":
                go_to_month(view)
            elif choice == "4":
                choose_team(view)
            elif choice == "5":
                print(render_planner(view))
            elif choice == "6":
                show_day(view)
            elif choice == "0":
                print("До свидания.")
                break
            else:
                print("Неверный выбор.")
        except GoBackAction:
            print("Назад в меню")
        except CancelAction:
            print("Главное меню")


def _ask(prompt: str, parse, default: str | None = None):
    # re-prompt until the value parses; cancel/back propagate
    while True:
        text = get_input(prompt, default=default)
        try:
            return parse(text)
        except ValueError as e:
            print(f"Ошибка: {e}")


def go_to_month(view: ShiftView):
    month = _ask("Месяц (ГГГГ-ММ)", parse_month, default=view.month.strftime("%Y-%m"))
    view.go_to(month)
    print(render_month(view))


def choose_team(view: ShiftView):
    choices = "/".join(t.value for t in Team)
    team = _ask(f"Команда ({choices})", parse_team, default=view.team.value)
    view.set_team(team)
    print(render_month(view))


def show_day(view: ShiftView):
    day = _ask("Дата (ГГГГ-ММ-ДД)", parse_date, default=view.today.isoformat())
    print(render_day(view, day))
