"""
Tests for MaterialFormDialog input reporting.

These need a Tk display; they are skipped on headless machines.
"""

import pytest

try:
    import tkinter as tk

    _root = tk.Tk()
    _root.withdraw()
    _HAS_DISPLAY = True
except Exception:
    _HAS_DISPLAY = False

pytestmark = pytest.mark.skipif(not _HAS_DISPLAY, reason="No display available for tkinter tests")


@pytest.fixture
def root():
    """Provide the shared hidden root window."""
    yield _root


@pytest.fixture
def changes():
    return []


@pytest.fixture
def dialog(root, changes):
    from src.ui.forms.material_form import MaterialFormDialog

    form = MaterialFormDialog(
        root,
        title="Add New Material",
        submit_text="Save",
        on_change=lambda name, is_active: changes.append((name, is_active)),
        on_submit=lambda: None,
        on_cancel=lambda: None,
        name="Copper",
        language="en",
    )
    yield form
    form.destroy()


def test_initial_name_shown(dialog):
    assert dialog.name_entry.get() == "Copper"


def test_text_inserted_without_keystroke_reported(dialog, changes):
    """Paste and other non-key edits reach the owner."""
    dialog.name_entry.delete(0, "end")
    dialog.name_entry.insert(0, "Pasted name")

    assert changes[-1] == ("Pasted name", True)


def test_variable_write_reported(dialog, changes):
    dialog.name_var.set("Brass")
    assert changes[-1] == ("Brass", True)


def test_switch_reported_with_current_name(dialog, changes):
    dialog.active_switch.toggle()
    assert changes[-1] == ("Copper", False)
