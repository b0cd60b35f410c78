"""Price data layer for the Dorry BOQ engine."""

from dorry.data.prices import SEED_MATERIAL_PRICES, MaterialPrice
from dorry.data.repository import PriceTable

__all__ = [
    "MaterialPrice",
    "PriceTable",
    "SEED_MATERIAL_PRICES",
]
