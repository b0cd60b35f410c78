"""Factory functions for creating pre-configured engines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dorry.data.prices import SEED_MATERIAL_PRICES
from dorry.data.repository import PriceTable
from dorry.engine import BoqEngine

if TYPE_CHECKING:
    from collections.abc import Mapping

    from dorry.data.prices import MaterialPrice


def create_default_engine(
    prices: Mapping[str, MaterialPrice] | None = None,
) -> BoqEngine:
    """Create a BoqEngine wired to a price table.

    Uses the built-in seed prices unless ``prices`` is given, which lets
    tests and regional deployments substitute their own table.

    Example::

        from dorry import create_default_engine

        engine = create_default_engine()
        items = engine.estimate(rooms, total_area)
    """
    table = PriceTable(SEED_MATERIAL_PRICES if prices is None else prices)
    return BoqEngine(table)
