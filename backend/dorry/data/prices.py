"""Seed material prices for the Egyptian market.

Prices are in EGP per unit and reflect typical local supplier rates.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MaterialPrice(BaseModel):
    """Unit price of a single material."""

    model_config = ConfigDict(frozen=True)

    price: float = Field(ge=0)
    unit: str


UNKNOWN_MATERIAL_PRICE = MaterialPrice(price=0.0, unit="unknown")


SEED_MATERIAL_PRICES: dict[str, MaterialPrice] = {
    # --- Concrete & Foundation ---
    "regular_concrete": MaterialPrice(price=1200.0, unit="m³"),
    "reinforced_concrete": MaterialPrice(price=2500.0, unit="m³"),
    "foundation_concrete": MaterialPrice(price=2200.0, unit="m³"),
    # --- Structural elements ---
    "steel_reinforcement": MaterialPrice(price=20000.0, unit="ton"),
    "concrete_blocks": MaterialPrice(price=35.0, unit="piece"),
    "red_brick": MaterialPrice(price=2.5, unit="piece"),
    "cement": MaterialPrice(price=1500.0, unit="ton"),
    # --- Finishes & materials ---
    "ceramic_tiles": MaterialPrice(price=150.0, unit="m²"),
    "porcelain_tiles": MaterialPrice(price=350.0, unit="m²"),
    "marble": MaterialPrice(price=1200.0, unit="m²"),
    "granite": MaterialPrice(price=1500.0, unit="m²"),
    "paint": MaterialPrice(price=120.0, unit="liter"),
    "gypsum_board": MaterialPrice(price=180.0, unit="m²"),
    "wooden_doors": MaterialPrice(price=3500.0, unit="piece"),
    "aluminum_windows": MaterialPrice(price=2800.0, unit="m²"),
    # --- Plumbing & electrical ---
    "water_pipes": MaterialPrice(price=75.0, unit="meter"),
    "drainage_pipes": MaterialPrice(price=120.0, unit="meter"),
    "electrical_wiring": MaterialPrice(price=25.0, unit="meter"),
    "electrical_outlets": MaterialPrice(price=65.0, unit="piece"),
    "light_fixtures": MaterialPrice(price=350.0, unit="piece"),
    "water_heater": MaterialPrice(price=4500.0, unit="piece"),
    "toilet": MaterialPrice(price=2200.0, unit="piece"),
    "sink": MaterialPrice(price=1800.0, unit="piece"),
}
