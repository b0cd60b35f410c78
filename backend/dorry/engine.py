"""Bill-of-quantities engine for the Dorry design pipeline.

The BoqEngine derives quantities from geometric proxies of a layout:

1. **Concrete**: foundation volume is 0.3 m³ per m² of built area, structural
   (columns and beams) 0.2 m³ per m².
2. **Steel**: 0.1 ton per m³ of concrete.
3. **Walls**: wall area is taken as 3x the floor area, at 50 bricks per m².
4. **Finishes**: floor tiles cover the built area; paint at 0.25 liter per m²
   of wall.
5. **Fixtures**: one toilet per bathroom (never fewer than one) and one sink
   per bathroom plus the kitchen sink.

Each quantity is priced from the injected PriceTable.  Totals are exact sums
of ``quantity * unit_price``; rounding belongs to the display layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dorry.models.boq import BoqItem, BudgetWarning
from dorry.models.enums import BoqCategory, RoomType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dorry.data.repository import PriceTable
    from dorry.models.design import Room

_FOUNDATION_DEPTH_M = 0.3
_STRUCTURAL_CONCRETE_RATIO = 0.2
_STEEL_TONS_PER_M3 = 0.1
_WALL_TO_FLOOR_RATIO = 3
_BRICKS_PER_M2 = 50
_PAINT_LITERS_PER_M2 = 0.25

ENGINE_VERSION = "0.1.0"


class BoqEngine:
    """Converts a room layout and built area into priced BOQ lines.

    Args:
        prices: The material price table.  Lookups for unknown materials
            produce zero-priced lines instead of errors.

    Example::

        from dorry.data import PriceTable, SEED_MATERIAL_PRICES

        engine = BoqEngine(PriceTable(SEED_MATERIAL_PRICES))
        items = engine.estimate(design.design_data.rooms, design.design_data.total_area)
        total = engine.total_cost(items)
    """

    def __init__(self, prices: PriceTable) -> None:
        self._prices = prices

    def estimate(self, rooms: Sequence[Room], total_area: float) -> list[BoqItem]:
        """Produce the fixed set of BOQ lines for a layout.

        Args:
            rooms: The layout's rooms; only bathrooms affect the result.
            total_area: Built area in square meters.

        Returns:
            Eight items in a stable order: foundation concrete, structural
            concrete, steel, bricks, floor tiles, paint, toilets, sinks.
        """
        foundation_volume = total_area * _FOUNDATION_DEPTH_M
        structural_volume = total_area * _STRUCTURAL_CONCRETE_RATIO
        steel_tons = (foundation_volume + structural_volume) * _STEEL_TONS_PER_M3
        wall_area = total_area * _WALL_TO_FLOOR_RATIO
        brick_count = wall_area * _BRICKS_PER_M2
        paint_liters = wall_area * _PAINT_LITERS_PER_M2

        bathroom_count = sum(1 for r in rooms if r.type == RoomType.BATHROOM) or 1

        return [
            self._line(
                BoqCategory.CONCRETE_FOUNDATION,
                "Foundation Concrete",
                "Reinforced concrete for building foundation",
                "m³",
                foundation_volume,
                "foundation_concrete",
            ),
            self._line(
                BoqCategory.STRUCTURAL_ELEMENTS,
                "Structural Concrete",
                "Reinforced concrete for columns and beams",
                "m³",
                structural_volume,
                "reinforced_concrete",
            ),
            self._line(
                BoqCategory.STRUCTURAL_ELEMENTS,
                "Steel Reinforcement",
                "Steel bars for concrete reinforcement",
                "ton",
                steel_tons,
                "steel_reinforcement",
            ),
            self._line(
                BoqCategory.STRUCTURAL_ELEMENTS,
                "Brick Walls",
                "Red brick walls with mortar",
                "piece",
                brick_count,
                "red_brick",
            ),
            self._line(
                BoqCategory.FINISHES_MATERIALS,
                "Ceramic Floor Tiles",
                "Ceramic tiles for flooring",
                "m²",
                total_area,
                "ceramic_tiles",
            ),
            self._line(
                BoqCategory.FINISHES_MATERIALS,
                "Wall Paint",
                "Interior wall paint",
                "liter",
                paint_liters,
                "paint",
            ),
            self._line(
                BoqCategory.FINISHES_MATERIALS,
                "Toilet Fixtures",
                "Complete toilet fixtures",
                "piece",
                bathroom_count,
                "toilet",
            ),
            self._line(
                BoqCategory.FINISHES_MATERIALS,
                "Sink Fixtures",
                "Bathroom and kitchen sinks",
                "piece",
                bathroom_count + 1,
                "sink",
            ),
        ]

    @staticmethod
    def total_cost(items: Sequence[BoqItem]) -> float:
        """Exact sum of line totals."""
        return sum(item.total_price for item in items)

    @staticmethod
    def group_by_category(items: Sequence[BoqItem]) -> dict[BoqCategory, float]:
        """Sum line totals per category.

        Categories without items are absent from the result, not zero.
        """
        categories: dict[BoqCategory, float] = {}
        for item in items:
            categories[item.category] = categories.get(item.category, 0.0) + item.total_price
        return categories

    @staticmethod
    def check_budget(total_cost: float, budget: float | None) -> BudgetWarning | None:
        """Return a warning when ``total_cost`` exceeds a set budget."""
        if not budget or total_cost <= budget:
            return None
        return BudgetWarning(
            message="The estimated cost exceeds the project budget",
            difference=total_cost - budget,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _line(
        self,
        category: BoqCategory,
        name: str,
        description: str,
        unit: str,
        quantity: float,
        material: str,
    ) -> BoqItem:
        price = self._prices.get_material_price(material)
        return BoqItem.priced(
            category=category,
            name=name,
            description=description,
            unit=unit,
            quantity=quantity,
            unit_price=price.price,
        )
