# passgen/gui.py
# PassGen desktop window: generator options, strength bar, clipboard copy with auto-clear

import sys
import os
import typing
import logging

from PySide6.QtCore import QTimer
from PySide6.QtGui import QClipboard
from PySide6.QtWidgets import (
    QApplication, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit,
    QPushButton, QCheckBox, QTextEdit, QProgressBar, QFrame,
)

from passgen.charclass import CharacterClass
from passgen.config import generator_config_from, load_config
from passgen.errors import PassGenError
from passgen.evaluator import assess_strength
from passgen.generator import PasswordGenerator, parse_length
from passgen.log import setup_logging

logger = logging.getLogger(__name__)

STYLE_PATH = os.path.join(os.path.dirname(__file__), "style.qss")

NO_CLASS_MESSAGE = "Please select at least one character class."


def load_style_sheet(path: str = STYLE_PATH) -> str:
    """Return the style sheet text, or "" (default Qt style) if it can't be read."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        logger.warning("Failed to read style sheet %s, falling back to default style: %s", path, e)
        return ""


class PassGenWindow(QWidget):
    def __init__(self, cfg: typing.Optional[dict] = None):
        super().__init__()
        self.setWindowTitle("Password Generator")
        self.setMinimumSize(400, 400)
        self.clip_timer: typing.Optional[QTimer] = None

        self.cfg = cfg if cfg is not None else load_config()
        try:
            self.clip_clear_seconds = int(self.cfg.get("clipboard_clear_seconds", 20))
        except (TypeError, ValueError):
            logger.warning("ignoring invalid clipboard_clear_seconds: %r", self.cfg.get("clipboard_clear_seconds"))
            self.clip_clear_seconds = 20
        defaults = generator_config_from(self.cfg)
        self.group_mode = defaults.group_mode

        layout = QVBoxLayout()
        layout.setSpacing(10)
        self.setLayout(layout)

        subtitle = QLabel("Create secure passwords easily")
        subtitle.setObjectName("subtitle")

        self.length_entry = QLineEdit()
        self.length_entry.setPlaceholderText("Enter password length")
        self.length_entry.setText(str(defaults.length))

        self.exclude_entry = QLineEdit()
        self.exclude_entry.setPlaceholderText("Enter characters to exclude")
        self.exclude_entry.setText(defaults.excluded)

        self.class_boxes = {
            CharacterClass.UPPER_LETTERS: QCheckBox("Include Uppercase Letters"),
            CharacterClass.LOWER_LETTERS: QCheckBox("Include Lowercase Letters"),
            CharacterClass.NUMBERS: QCheckBox("Include Numbers"),
            CharacterClass.SPECIAL_CHARACTERS: QCheckBox("Include Special Characters"),
        }
        for cls, box in self.class_boxes.items():
            box.setChecked(cls in defaults.classes)

        self.chk_every_group = QCheckBox("At least one character from every group")
        self.chk_every_group.setChecked(defaults.one_per_group)

        separator = QFrame()
        separator.setFrameShape(QFrame.Shape.HLine)

        self.btn_generate = QPushButton("Generate Password")
        self.btn_generate.setObjectName("suggested-action")

        self.error_label = QLabel("")
        self.error_label.setObjectName("error")

        self.strength_bar = QProgressBar()
        self.strength_bar.setRange(0, 100)
        self.strength_bar.setValue(0)
        self.strength_bar.setTextVisible(True)
        self.strength_bar.setFormat("")

        self.strength_label = QLabel("")
        self.strength_label.setObjectName("strength-label")

        self.result_view = QTextEdit()
        self.result_view.setReadOnly(True)
        self.result_view.setToolTip("Generated password (read-only)")

        self.btn_copy = QPushButton("Copy (auto-clear)")

        layout.addWidget(subtitle)
        layout.addWidget(self.length_entry)
        layout.addWidget(self.exclude_entry)
        for box in self.class_boxes.values():
            layout.addWidget(box)
        layout.addWidget(self.chk_every_group)
        layout.addWidget(separator)
        row = QHBoxLayout()
        row.addWidget(self.btn_generate)
        row.addWidget(self.btn_copy)
        layout.addLayout(row)
        layout.addWidget(self.error_label)
        layout.addWidget(self.strength_bar)
        layout.addWidget(self.strength_label)
        layout.addWidget(self.result_view, 1)

        self.btn_generate.clicked.connect(self.on_generate_click)
        self.btn_copy.clicked.connect(self.on_copy_generated)

    # ----------------- Generator actions -----------------
    def selected_classes(self) -> typing.FrozenSet[CharacterClass]:
        return frozenset(cls for cls, box in self.class_boxes.items() if box.isChecked())

    def on_generate_click(self):
        self.error_label.setText("")

        try:
            length = parse_length(self.length_entry.text())
        except PassGenError as e:
            self.error_label.setText(str(e))
            return

        classes = self.selected_classes()
        if not classes:
            self.error_label.setText(NO_CLASS_MESSAGE)
            return

        generator = PasswordGenerator()
        generator.configure(
            length=length,
            classes=classes,
            excluded=self.exclude_entry.text(),
            one_per_group=self.chk_every_group.isChecked(),
            group_mode=self.group_mode,
        )
        try:
            pw = generator.generate()
        except PassGenError as e:
            self.error_label.setText(str(e))
            return

        self.result_view.setPlainText(pw)
        self.show_strength(pw)

    def show_strength(self, pw: str):
        report = assess_strength(pw)
        self.strength_bar.setValue(int(round(report.fraction * 100)))
        self.strength_bar.setFormat(report.label)
        self.strength_label.setText(report.label)

    # ----------------- Clipboard -----------------
    def on_copy_generated(self):
        pw = self.result_view.toPlainText()
        if not pw:
            return
        clipboard: QClipboard = QApplication.clipboard()
        clipboard.setText(pw, mode=QClipboard.Mode.Clipboard)
        if clipboard.supportsSelection():
            clipboard.setText(pw, mode=QClipboard.Mode.Selection)

        btn = self.btn_copy
        old_text = btn.text()
        btn.setText("Copied ✓")
        btn.setEnabled(False)
        QTimer.singleShot(1500, lambda: (btn.setText(old_text), btn.setEnabled(True)))

        self.start_clipboard_clear_timer(self.clip_clear_seconds)

    def start_clipboard_clear_timer(self, seconds: int):
        if self.clip_timer and self.clip_timer.isActive():
            self.clip_timer.stop()
        self.clip_timer = QTimer(self)
        self.clip_timer.setSingleShot(True)
        self.clip_timer.timeout.connect(self.clear_clipboard)
        self.clip_timer.start(seconds * 1000)

    def clear_clipboard(self):
        clipboard: QClipboard = QApplication.clipboard()
        clipboard.setText("", mode=QClipboard.Mode.Clipboard)
        if clipboard.supportsSelection():
            clipboard.setText("", mode=QClipboard.Mode.Selection)


def main():
    cfg = load_config()
    setup_logging(cfg.get("log_level", "WARNING"))
    app = QApplication(sys.argv)
    app.setStyleSheet(load_style_sheet())
    gui = PassGenWindow(cfg)
    gui.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
