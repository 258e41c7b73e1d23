import sys
from datetime import date, datetime
from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QApplication,
    QDialog,
    QLabel,
    QMainWindow,
    QMessageBox,
    QVBoxLayout,
    QWidget,
)
from ft.common.logger import apply_log_settings, log
from ft.core import config
from ft.core.formatting import format_live_clock, format_summary
from ft.core.live_clock import LiveClock
from ft.ui.dialogs import SaveSessionDialog, StartSessionDialog
from ft.ui.theme import build_stylesheet, resolve_theme
from ft.ui.widgets import build_footer, build_timer_bar, set_status_dot


# Sum of minutes across activities created today (local time).
def minutes_today(activities, today=None):
    today = today or date.today()
    total = 0
    for activity in activities:
        # Records with a bad date or duration are skipped rather than breaking the total.
        try:
            created = datetime.fromisoformat(activity["created_at"]).date()
            minutes = int(activity.get("duration_minutes", 0))
        except (KeyError, TypeError, ValueError):
            continue
        if created == today:
            total += minutes
    return total


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------

# Main window of the application. Shows the start button while idle and the timer bar while a session runs.
# The LiveClock is handed in, the window never creates its own.
class MainWindow(QMainWindow):

    def __init__(self, clock, settings=None, on_save=None):
        super().__init__()
        self.setWindowTitle("Focus Timer")

        # -- Settings --
        s = settings if settings is not None else config.load_settings()
        self.settings = s
        self.categories = list(s["categories"])
        self.theme = resolve_theme(s["theme"])
        self.font_family = "Calibri"
        self.confirm_discard = s["confirm_discard"]
        self._on_save = on_save or config.save_activity

        if s["always_on_top"]:
            self.setWindowFlags(self.windowFlags() | Qt.WindowStaysOnTopHint)

        # -- Live clock --
        self.clock = clock
        self.clock.tick.connect(self._on_tick)
        self.clock.state_changed.connect(self._on_state_changed)

        # -- Build UI --
        central = QWidget()
        self.setCentralWidget(central)
        lay = QVBoxLayout(central)

        title = QLabel("Focus Timer")
        title.setObjectName("muted")
        lay.addWidget(title)

        self._bar, self._bar_widgets = build_timer_bar(
            self.theme, self.font_family,
            on_pause=self.clock.pause,
            on_resume=self.clock.resume,
            on_stop=self._on_stop,
        )
        lay.addWidget(self._bar)

        self._footer, self._footer_widgets = build_footer(self.font_family, self._on_start)
        lay.addWidget(self._footer)

        self.setStyleSheet(build_stylesheet(self.theme))
        self._on_state_changed(self.clock.status)
        self._refresh_today()
        QTimer.singleShot(0, self.adjustSize)

    # ------------------------------------------------------------------ #
    #  Timer control                                                       #
    # ------------------------------------------------------------------ #

    def _on_start(self):
        dlg = StartSessionDialog(self, self.categories)
        if dlg.exec() == QDialog.Accepted and dlg.chosen_category:
            self.clock.start(dlg.chosen_category)

    def _on_stop(self):
        result = self.clock.stop()
        if result is None:
            return
        dlg = SaveSessionDialog(
            self, result, self.categories, self._on_save,
            default_focus_level=self.settings["default_focus_level"],
            default_visibility=self.settings["default_visibility"],
        )
        if dlg.exec() == QDialog.Accepted:
            self._refresh_today()
        else:
            log.info(f"Discarded {result.duration}s '{result.category}' session")

    # ------------------------------------------------------------------ #
    #  Display                                                             #
    # ------------------------------------------------------------------ #

    def _on_tick(self, seconds):
        self._bar_widgets["clock"].setText(format_live_clock(seconds))

    def _on_state_changed(self, status):
        w = self._bar_widgets
        running = status != "idle"
        paused = status == "paused"
        self._bar.setVisible(running)
        self._footer_widgets["start_btn"].setVisible(not running)
        w["category"].setText(self.clock.timer.category)
        w["pause"].setVisible(running and not paused)
        w["resume"].setVisible(paused)
        set_status_dot(w["dot"], self.theme, paused)
        w["clock"].setText(format_live_clock(self.clock.timer.elapsed_seconds))
        QTimer.singleShot(0, self.adjustSize)

    def _refresh_today(self):
        total = minutes_today(config.load_activities())
        self._footer_widgets["today"].setText(f"Today: {format_summary(total)}")

    # ------------------------------------------------------------------ #
    #  Window close                                                        #
    # ------------------------------------------------------------------ #

    def closeEvent(self, event):
        if self.clock.timer.is_running and self.confirm_discard:
            if QMessageBox.question(
                    self, "Discard session?",
                    "A session is still running and will be lost. Quit anyway?"
            ) != QMessageBox.Yes:
                event.ignore()
                return
        self.clock.reset()
        self.clock.shutdown()
        event.accept()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main():
    app = QApplication(sys.argv)
    settings = config.load_settings()
    apply_log_settings(settings)
    clock = LiveClock(tick_interval_ms=settings["tick_interval_ms"])
    window = MainWindow(clock, settings)
    window.show()
    sys.exit(app.exec())
