# exceptions.py
class CancelAction(Exception):
    """'отмена' / 'cancel' typed at a prompt: back to the main menu."""


class GoBackAction(Exception):
    """'назад' / 'back' typed at a prompt: back one menu."""
