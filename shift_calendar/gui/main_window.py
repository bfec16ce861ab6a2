# gui/main_window.py
import sys

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QPushButton, QLabel,
    QButtonGroup, QScrollArea, QApplication,
)
from PySide6.QtCore import Qt

from shift_calendar.gui.calendar_widget import CalendarWidget
from shift_calendar.logic.rotation import shift_on
from shift_calendar.logic.shift_view import ShiftView
from shift_calendar.models.shift import SHIFT_COLORS, ShiftCode, Team
from shift_calendar.utils.date_helper import month_title


class MainWindow(QMainWindow):
    def __init__(self, view: ShiftView):
        super().__init__()
        self.setWindowTitle("График смен")
        self.resize(1100, 950)
        self.view = view

        self._build_ui()
        self.refresh()

    # ---------------- UI ----------------
    def _build_ui(self):
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        self.setCentralWidget(scroll)
        central = QWidget()
        scroll.setWidget(central)
        root = QVBoxLayout(central)

        title = QLabel("График смен")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("font-size:24px; font-weight:700; margin-bottom:8px;")
        root.addWidget(title)

        # team selector
        root.addWidget(QLabel("Выберите свою команду:"))
        team_row = QHBoxLayout()
        self.team_group = QButtonGroup(self)
        self.team_group.setExclusive(True)
        self.team_buttons = {}
        for team in Team:
            btn = QPushButton(f"Команда {team.value}")
            btn.setCheckable(True)
            btn.clicked.connect(lambda _=False, t=team: self.select_team(t))
            self.team_group.addButton(btn)
            self.team_buttons[team] = btn
            team_row.addWidget(btn)
        team_row.addStretch(1)
        root.addLayout(team_row)

        # month navigation
        nav = QHBoxLayout()
        btn_prev = QPushButton("← Предыдущий")
        btn_prev.clicked.connect(self.prev_month)
        nav.addWidget(btn_prev)

        self.month_label = QLabel("")
        self.month_label.setAlignment(Qt.AlignCenter)
        self.month_label.setStyleSheet("font-size:18px; font-weight:600; padding:0 8px;")
        nav.addWidget(self.month_label, 1)

        btn_next = QPushButton("Следующий →")
        btn_next.clicked.connect(self.next_month)
        nav.addWidget(btn_next)
        root.addLayout(nav)

        # main month
        self.calendar = CalendarWidget()
        root.addWidget(self.calendar)

        # legend
        legend = QHBoxLayout()
        for code in ShiftCode:
            bg, border, fg = SHIFT_COLORS[code]
            lbl = QLabel(code.label)
            lbl.setStyleSheet(
                f"background:{bg}; border:1px solid {border}; color:{fg};"
                " border-radius:6px; padding:2px 8px;"
            )
            legend.addWidget(lbl)
        legend.addStretch(1)
        root.addLayout(legend)

        # planner: previous / current / next month
        planner_title = QLabel("Планировщик")
        planner_title.setAlignment(Qt.AlignCenter)
        planner_title.setStyleSheet("font-size:18px; font-weight:700; margin-top:16px;")
        root.addWidget(planner_title)

        planner_row = QHBoxLayout()
        self.planner = []
        for _ in range(3):
            w = CalendarWidget(compact=True)
            self.planner.append(w)
            planner_row.addWidget(w)
        root.addLayout(planner_row)
        root.addStretch(1)

        self.status = self.statusBar()

    # ---------------- actions ----------------
    def refresh(self):
        view = self.view
        self.team_buttons[view.team].setChecked(True)
        self.month_label.setText(month_title(view.month))
        self.calendar.render_month(view, view.month, view.month_grid())

        for widget, pm in zip(self.planner, view.planner()):
            widget.render_month(view, pm.month, pm.weeks, title=month_title(pm.month))

        today = view.today
        self.status.showMessage(
            f"Команда {view.team.value} · сегодня {today.strftime('%d.%m.%Y')}: "
            f"{shift_on(today, view.team, view.saturday).label}"
        )

    def select_team(self, team: Team):
        self.view.set_team(team)
        self.refresh()

    def prev_month(self):
        self.view.prev_month()
        self.refresh()

    def next_month(self):
        self.view.next_month()
        self.refresh()


def run_gui(view: ShiftView) -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    win = MainWindow(view)
    win.show()
    return app.exec()
