"""Start-session and save-session dialogs."""

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QButtonGroup,
    QComboBox,
    QDialog,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QSlider,
    QVBoxLayout,
)
from ft.common.logger import log
from ft.core.config import VISIBILITIES, build_activity
from ft.core.formatting import focus_label, format_session_duration, to_save_minutes


def _category_grid(categories, selected, on_pick):
    """Grid of checkable, mutually exclusive category buttons. Returns (layout, button_group)."""
    grid = QGridLayout()
    grid.setSpacing(8)
    group = QButtonGroup(grid)
    group.setExclusive(True)
    for i, cat in enumerate(categories):
        btn = QPushButton(cat)
        btn.setCheckable(True)
        btn.setChecked(cat == selected)
        btn.clicked.connect(lambda _=False, c=cat: on_pick(c))
        group.addButton(btn)
        grid.addWidget(btn, i // 2, i % 2)
    return grid, group


# Asks what the user is about to work on. Opened from the idle footer; MainWindow reads `chosen_category` after
# it's accepted and starts the clock with it.
class StartSessionDialog(QDialog):

    def __init__(self, parent, categories):
        super().__init__(parent)
        self.setWindowTitle("Start Focus Session")
        self.setModal(True)

        # Output attribute, read by MainWindow after dialog closes
        self.chosen_category = None

        outer = QVBoxLayout(self)

        prompt = QLabel("What are you working on?")
        prompt.setFont(QFont("Calibri", 12))
        outer.addWidget(prompt)

        grid, self._group = _category_grid(categories, None, self._on_pick)
        outer.addLayout(grid)

        info = QLabel("The timer will start immediately. You can pause or stop at any time. "
                      "When you finish, you'll be able to add notes.")
        info.setObjectName("muted")
        info.setWordWrap(True)
        outer.addWidget(info)

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        cancel_btn = QPushButton("Cancel")
        cancel_btn.clicked.connect(self.reject)
        btn_row.addWidget(cancel_btn)
        self._start_btn = QPushButton("Start Timer")
        self._start_btn.setObjectName("primary")
        self._start_btn.setEnabled(False)
        self._start_btn.clicked.connect(self.accept)
        btn_row.addWidget(self._start_btn)
        outer.addLayout(btn_row)

    def _on_pick(self, category):
        self.chosen_category = category
        self._start_btn.setEnabled(True)


# Shown right after a session is stopped. The timer is already idle by now, so discarding just closes the
# dialog. Saving builds an activity record and passes it to `on_save`.
class SaveSessionDialog(QDialog):

    def __init__(self, parent, result, categories, on_save, default_focus_level=7, default_visibility="public"):
        super().__init__(parent)
        self.setWindowTitle("Save Activity")
        self.setModal(True)

        self._duration = result.duration
        self._on_save = on_save

        # Output attributes
        self.chosen_category = result.category
        self.saved_activity = None
        self.saved_path = None

        outer = QVBoxLayout(self)

        # Duration headline
        dur_caption = QLabel("Session Duration")
        dur_caption.setObjectName("muted")
        outer.addWidget(dur_caption)
        self._duration_lbl = QLabel(format_session_duration(result.duration))
        self._duration_lbl.setObjectName("clock")
        self._duration_lbl.setFont(QFont("Calibri", 20))
        outer.addWidget(self._duration_lbl)
        minutes_lbl = QLabel(f"Saved as {to_save_minutes(result.duration)} min")
        minutes_lbl.setObjectName("muted")
        outer.addWidget(minutes_lbl)

        # Category, pre-selected from the session. A category outside the configured list still shows up.
        outer.addWidget(QLabel("Category"))
        if result.category and result.category not in categories:
            categories = list(categories) + [result.category]
        grid, self._group = _category_grid(categories, result.category, self._on_pick)
        outer.addLayout(grid)

        outer.addWidget(QLabel("What did you work on?"))
        self._note = QPlainTextEdit()
        self._note.setPlaceholderText("Describe your session...")
        self._note.setFixedHeight(80)
        outer.addWidget(self._note)

        # Focus level 1-10
        focus_row = QHBoxLayout()
        focus_row.addWidget(QLabel("Focus Level"))
        self._focus_value = QLabel()
        self._focus_value.setFont(QFont("Calibri", 14))
        focus_row.addWidget(self._focus_value)
        focus_row.addStretch()
        self._focus_text = QLabel()
        self._focus_text.setObjectName("muted")
        focus_row.addWidget(self._focus_text)
        outer.addLayout(focus_row)

        self._focus = QSlider(Qt.Horizontal)
        self._focus.setRange(1, 10)
        self._focus.setValue(default_focus_level)
        self._focus.valueChanged.connect(self._on_focus_changed)
        outer.addWidget(self._focus)
        self._on_focus_changed(self._focus.value())

        vis_row = QHBoxLayout()
        vis_row.addWidget(QLabel("Visibility"))
        self._visibility = QComboBox()
        self._visibility.addItems(list(VISIBILITIES))
        self._visibility.setCurrentText(default_visibility)
        vis_row.addWidget(self._visibility, 1)
        outer.addLayout(vis_row)

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        discard_btn = QPushButton("Discard")
        discard_btn.clicked.connect(self.reject)
        btn_row.addWidget(discard_btn)
        self._save_btn = QPushButton("Save Activity")
        self._save_btn.setObjectName("primary")
        self._save_btn.setEnabled(bool(self.chosen_category))
        self._save_btn.clicked.connect(self._save)
        btn_row.addWidget(self._save_btn)
        outer.addLayout(btn_row)

    def _on_pick(self, category):
        self.chosen_category = category
        self._save_btn.setEnabled(True)

    def _on_focus_changed(self, value):
        self._focus_value.setText(f"{value}/10")
        self._focus_text.setText(focus_label(value))

    def build_activity(self):
        return build_activity(
            self.chosen_category,
            self._duration,
            note=self._note.toPlainText(),
            focus_level=self._focus.value(),
            visibility=self._visibility.currentText(),
        )

    # The dialog stays open on failure so the user can retry or discard.
    def _save(self):
        activity = self.build_activity()
        self._save_btn.setEnabled(False)
        try:
            self.saved_path = self._on_save(activity)
        except OSError as e:
            log.exception("Failed to save activity")
            QMessageBox.warning(self, "Save Error", f"Failed to save activity:\n{e}")
            self._save_btn.setEnabled(True)
            return
        self.saved_activity = activity
        self.accept()
