"""Tests for material row formatting."""

from src.models.material import Material
from src.ui.utils.formatting import format_alloys, format_status, material_row_values


def test_row_values_are_one_based():
    material = Material(id=42, name="Copper", is_active=True, alloys_count=4)
    assert material_row_values(0, material, "en") == ["1", "Copper", "4 alloys"]


def test_row_number_follows_display_position():
    material = Material(id=42, name="Steel", is_active=False, alloys_count=0)
    assert material_row_values(2, material, "en")[0] == "3"


def test_zero_alloys():
    assert format_alloys(Material(id=1, name="Tin"), "en") == "0 alloys"


def test_status_text():
    assert format_status(Material(id=1, name="Tin", is_active=False), "en") == "Inactive"
    assert format_status(Material(id=1, name="Tin", is_active=True), "fa") == "فعال"


def test_persian_alloys():
    assert format_alloys(Material(id=1, name="Tin", alloys_count=7), "fa") == "7 آلیاژ"
