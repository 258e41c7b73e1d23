"""Widget builders for the main window.

Each builder returns a (container, widget_dict) tuple.  The widget_dict maps
logical names to sub-widgets for later updates.
"""

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QWidget,
)
from ft.core.formatting import format_live_clock


def set_status_dot(dot, theme, paused):
    color = theme["paused"] if paused else theme["running"]
    dot.setStyleSheet(f"color: {color};")


def build_timer_bar(theme, font_family, on_pause, on_resume, on_stop):
    """Build the running-session bar: status dot, category, live clock, controls.

    Returns (container, widget_dict).  Pause and resume share one button slot;
    only one of them is visible at a time.
    """
    bar = QWidget()
    bar.setObjectName("timerBar")
    bar.setAttribute(Qt.WA_StyledBackground, True)
    lay = QHBoxLayout(bar)
    lay.setContentsMargins(16, 8, 16, 8)
    lay.setSpacing(12)

    dot = QLabel("●")
    dot.setFont(QFont(font_family, 10))
    set_status_dot(dot, theme, paused=False)
    lay.addWidget(dot)

    category_lbl = QLabel("")
    category_lbl.setFont(QFont(font_family, 11))
    lay.addWidget(category_lbl)

    clock_lbl = QLabel(format_live_clock(0))
    clock_lbl.setObjectName("clock")
    clock_lbl.setFont(QFont(font_family, 16))
    clock_lbl.setAlignment(Qt.AlignCenter)
    clock_lbl.setMinimumWidth(100)
    lay.addWidget(clock_lbl, 1)

    pause_btn = QPushButton("Pause")
    pause_btn.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
    pause_btn.clicked.connect(lambda _=False: on_pause())
    lay.addWidget(pause_btn)

    resume_btn = QPushButton("Resume")
    resume_btn.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
    resume_btn.clicked.connect(lambda _=False: on_resume())
    resume_btn.setVisible(False)
    lay.addWidget(resume_btn)

    stop_btn = QPushButton("Stop")
    stop_btn.setObjectName("danger")
    stop_btn.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
    stop_btn.clicked.connect(lambda _=False: on_stop())
    lay.addWidget(stop_btn)

    widget_dict = {
        "dot": dot, "category": category_lbl, "clock": clock_lbl,
        "pause": pause_btn, "resume": resume_btn, "stop": stop_btn,
        "container": bar,
    }
    return bar, widget_dict


def build_footer(font_family, on_start):
    """Build the idle footer: start button plus today's total.

    Returns (container, footer_widgets).
    """
    start_btn = QPushButton("Start session")
    start_btn.setObjectName("primary")
    start_btn.setFont(QFont(font_family, 11))
    start_btn.clicked.connect(lambda _=False: on_start())
    start_btn.setToolTip("Pick a category and start the clock")

    today_lbl = QLabel("")
    today_lbl.setObjectName("muted")
    today_lbl.setFont(QFont(font_family, 10))
    today_lbl.setAlignment(Qt.AlignRight | Qt.AlignVCenter)

    footer = QWidget()
    f_lay = QHBoxLayout(footer)
    f_lay.setContentsMargins(0, 0, 0, 0)
    f_lay.addWidget(start_btn)
    f_lay.addWidget(today_lbl, 1)

    footer_widgets = {
        "start_btn": start_btn,
        "today": today_lbl,
    }
    return footer, footer_widgets
