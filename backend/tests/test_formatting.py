"""Tests for display formatting helpers."""

from __future__ import annotations

from dorry.formatting import format_area, format_category_summary, format_egp
from dorry.models.enums import BoqCategory

# ---------- Currency ----------


def test_format_egp_thousands() -> None:
    assert format_egp(1_234_567.4) == "1,234,567 EGP"


def test_format_egp_rounds() -> None:
    assert format_egp(99.6) == "100 EGP"


def test_format_egp_zero() -> None:
    assert format_egp(0) == "0 EGP"


# ---------- Area ----------


def test_format_area() -> None:
    assert format_area(15.0) == "15 m²"
    assert format_area(1_250.4) == "1,250 m²"


# ---------- Category summary ----------


def test_format_category_summary() -> None:
    summary = {
        BoqCategory.CONCRETE_FOUNDATION: 297_000.0,
        BoqCategory.FINISHES_MATERIALS: 45_500.4,
    }
    assert format_category_summary(summary) == {
        "Concrete & Foundation": "297,000 EGP",
        "Finishes & Materials": "45,500 EGP",
    }
