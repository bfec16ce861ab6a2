# gui/calendar_widget.py
from datetime import date
from typing import List, Optional

from PySide6.QtWidgets import QWidget, QVBoxLayout, QGridLayout, QLabel, QFrame, QGraphicsOpacityEffect
from PySide6.QtCore import Qt

from shift_calendar.logic.shift_view import ShiftView
from shift_calendar.models.shift import SHIFT_COLORS
from shift_calendar.utils.date_helper import WEEKDAYS


def cell_style(code: int, today: bool, compact: bool = False) -> str:
    bg, border, fg = SHIFT_COLORS[code]
    width = 2 if today else 1
    border_color = "#3b82f6" if today else border
    return (
        f"QFrame {{ background:{bg}; border:{width}px solid {border_color};"
        f" border-radius:{6 if compact else 10}px; }}"
        f" QLabel {{ color:{fg}; border:none; background:transparent; }}"
    )


class CalendarWidget(QWidget):
    """
    One month grid (Mon..Sun).
    - full mode: day number + shift name, neighbouring months' days dimmed
    - compact mode (planner): day number only, empty slots outside the month
    """
    def __init__(self, compact: bool = False):
        super().__init__()
        self.compact = compact
        self.vbox = QVBoxLayout(self)
        self.vbox.setContentsMargins(0, 0, 0, 0)

        self.title = QLabel("")
        self.title.setAlignment(Qt.AlignCenter)
        self.title.setStyleSheet("font-weight:600;")
        self.vbox.addWidget(self.title)
        self.title.setVisible(compact)

        header = QGridLayout()
        self.vbox.addLayout(header)
        for c, w in enumerate(WEEKDAYS):
            lbl = QLabel(w); lbl.setAlignment(Qt.AlignCenter)
            lbl.setStyleSheet("color:#4b5563; font-size:%dpx;" % (11 if compact else 13))
            header.addWidget(lbl, 0, c)

        self.grid = QGridLayout()
        self.grid.setSpacing(2 if compact else 4)
        self.vbox.addLayout(self.grid)

    def clear_grid(self):
        while self.grid.count():
            item = self.grid.takeAt(0)
            w = item.widget()
            if w is not None:
                w.setParent(None)

    def render_month(self, view: ShiftView, month: date,
                     weeks: List[List[Optional[date]]], title: str = ""):
        self.clear_grid()
        self.title.setText(title)

        for r, week in enumerate(weeks):
            for c, day in enumerate(week):
                if day is None:
                    self.grid.addWidget(QWidget(), r, c)
                    continue

                code = view.shift_for(day)
                in_month = view.in_month(day, month)
                is_today = view.is_today(day)

                cell = QFrame()
                cell.setFrameShape(QFrame.StyledPanel)
                cell.setStyleSheet(cell_style(code, is_today, self.compact))
                v = QVBoxLayout(cell)
                v.setContentsMargins(2, 2, 2, 2)
                v.setSpacing(0)

                day_lbl = QLabel(str(day.day))
                day_lbl.setAlignment(Qt.AlignCenter)
                if is_today:
                    day_lbl.setStyleSheet("font-weight:700;")
                v.addWidget(day_lbl)

                if not self.compact:
                    name_lbl = QLabel(code.label)
                    name_lbl.setAlignment(Qt.AlignCenter)
                    name_lbl.setStyleSheet("font-size:10px;")
                    v.addWidget(name_lbl)

                cell.setToolTip(f"{day.isoformat()}: {code.label}")

                if not in_month:
                    dim = QGraphicsOpacityEffect(cell)
                    dim.setOpacity(0.4)
                    cell.setGraphicsEffect(dim)

                self.grid.addWidget(cell, r, c)
