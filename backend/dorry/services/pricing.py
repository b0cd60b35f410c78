"""Re-pricing a layout into the project's single live BOQ row."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dorry.engine import BoqEngine
    from dorry.models.boq import Boq
    from dorry.models.design import DesignData
    from dorry.storage.base import BoqStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepriceResult:
    """The stored BOQ and the total it replaced (``None`` if it is new)."""

    boq: Boq
    previous_total: float | None

    @property
    def cost_delta(self) -> float:
        if self.previous_total is None:
            return 0.0
        return self.boq.total_cost - self.previous_total


async def reprice(
    engine: BoqEngine,
    boqs: BoqStore,
    project_id: int,
    design_data: DesignData,
) -> RepriceResult:
    """Estimate ``design_data`` and write it over the project's BOQ.

    Updates the existing row in place, or creates it when the project has
    none yet.
    """
    items = engine.estimate(design_data.rooms, design_data.total_area)
    total = engine.total_cost(items)

    existing = await boqs.get_boq(project_id)
    if existing is None:
        boq = await boqs.create_boq(project_id, items, total)
        logger.info("Created BOQ %d for project %d: %.2f EGP", boq.id, project_id, total)
        return RepriceResult(boq=boq, previous_total=None)

    boq = await boqs.update_boq(existing.id, items, total)
    logger.info(
        "Updated BOQ %d for project %d: %.2f -> %.2f EGP",
        boq.id,
        project_id,
        existing.total_cost,
        total,
    )
    return RepriceResult(boq=boq, previous_total=existing.total_cost)
