import os
import string

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from passgen.charclass import CharacterClass  # noqa: E402
from passgen.gui import NO_CLASS_MESSAGE, PassGenWindow, load_style_sheet  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def window(qapp):
    w = PassGenWindow({
        "length": 12,
        "classes": ["lower", "digits"],
        "excluded": "",
        "one_per_group": False,
        "group_mode": "replace",
        "clipboard_clear_seconds": 20,
    })
    yield w
    w.close()


def test_style_sheet_ships_with_package():
    assert "QProgressBar" in load_style_sheet()


def test_missing_style_sheet_falls_back(tmp_path):
    assert load_style_sheet(str(tmp_path / "missing.qss")) == ""


def test_generate_fills_result_and_strength(window):
    window.exclude_entry.setText("aeiou")
    window.on_generate_click()
    pw = window.result_view.toPlainText()
    assert len(pw) == 12
    assert set(pw) <= set("bcdfghjklmnpqrstvwxyz0123456789")
    assert window.error_label.text() == ""
    assert window.strength_label.text() in ("Strong", "Very Strong")


def test_invalid_length_shows_error(window):
    window.length_entry.setText("abc")
    window.on_generate_click()
    assert window.error_label.text() == "Invalid length. Please enter a valid number."
    assert window.result_view.toPlainText() == ""


def test_no_class_shows_error(window):
    for box in window.class_boxes.values():
        box.setChecked(False)
    window.on_generate_click()
    assert window.error_label.text() == NO_CLASS_MESSAGE


def test_empty_pool_shows_error(window):
    window.class_boxes[CharacterClass.LOWER_LETTERS].setChecked(False)
    window.exclude_entry.setText(string.digits)
    window.on_generate_click()
    assert "No candidate characters remain" in window.error_label.text()


def test_bad_settings_fall_back_to_defaults(qapp):
    w = PassGenWindow({"classes": ["emoji"], "group_mode": "x", "clipboard_clear_seconds": "soon"})
    try:
        assert w.length_entry.text() == "12"
        assert all(box.isChecked() for box in w.class_boxes.values())
        assert w.clip_clear_seconds == 20
        w.on_generate_click()
        assert len(w.result_view.toPlainText()) == 12
    finally:
        w.close()
