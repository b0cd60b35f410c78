"""Formatting helpers for chat replies and API summaries.

Rounding happens only here; the engine and models keep exact values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from dorry.models.enums import BoqCategory


def format_egp(amount: float) -> str:
    """Whole Egyptian pounds with thousands separators, e.g. '1,234,567 EGP'."""
    return f"{amount:,.0f} EGP"


def format_area(square_meters: float) -> str:
    """Whole square meters, e.g. '27 m²'."""
    return f"{square_meters:,.0f} m²"


def format_category_summary(summary: Mapping[BoqCategory, float]) -> dict[str, str]:
    """Category totals as display strings keyed by category label."""
    return {str(category): format_egp(total) for category, total in summary.items()}
