"""Read-only price table used by the BOQ engine."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from dorry.data.prices import UNKNOWN_MATERIAL_PRICE

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from dorry.data.prices import MaterialPrice

logger = logging.getLogger(__name__)


class PriceTable:
    """Material key -> unit price lookup, fixed at construction.

    A missing key is not an error: the lookup degrades to a zero price with
    unit ``"unknown"`` so one unpriced material never aborts an estimate.
    """

    def __init__(self, prices: Mapping[str, MaterialPrice]) -> None:
        self._prices: Mapping[str, MaterialPrice] = MappingProxyType(dict(prices))

    def get_material_price(self, material: str) -> MaterialPrice:
        price = self._prices.get(material)
        if price is None:
            logger.warning("No price for material '%s'; pricing at 0", material)
            return UNKNOWN_MATERIAL_PRICE
        return price

    def __contains__(self, material: object) -> bool:
        return material in self._prices

    def __iter__(self) -> Iterator[str]:
        return iter(self._prices)

    def __len__(self) -> int:
        return len(self._prices)
