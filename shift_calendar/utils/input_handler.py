# utils/input_handler.py
from shift_calendar.exceptions import CancelAction, GoBackAction

CANCEL_WORDS = ("отмена", "cancel")
BACK_WORDS = ("назад", "back")


def get_input(prompt: str, allow_empty: bool = False, default: str | None = None) -> str:
    label = prompt
    if default is not None:
        label += f" [{default}]"
    label += ": "

    while True:
        v = input(label).strip()

        low = v.lower()
        if low in CANCEL_WORDS:
            raise CancelAction()
        if low in BACK_WORDS:
            raise GoBackAction()

        if not v and default is not None:
            return default
        if not v and allow_empty:
            return ""
        if not v:
            print("Введите значение или 'отмена' / 'назад'.")
            continue
        return v
