"""Bill-of-quantities models."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field, model_validator

from dorry.models.enums import BoqCategory  # noqa: TCH001


class BoqItem(BaseModel):
    """One priced line of a bill of quantities."""

    category: BoqCategory
    name: str
    description: str
    unit: str
    quantity: float = Field(gt=0)
    unit_price: float = Field(ge=0)
    total_price: float

    @model_validator(mode="after")
    def total_is_quantity_times_price(self) -> BoqItem:
        if self.total_price != self.quantity * self.unit_price:
            msg = (
                f"total_price must equal quantity * unit_price, got "
                f"{self.total_price} != {self.quantity} * {self.unit_price}"
            )
            raise ValueError(msg)
        return self

    @classmethod
    def priced(
        cls,
        category: BoqCategory,
        name: str,
        description: str,
        unit: str,
        quantity: float,
        unit_price: float,
    ) -> BoqItem:
        """Build an item with ``total_price`` derived from quantity and price."""
        return cls(
            category=category,
            name=name,
            description=description,
            unit=unit,
            quantity=quantity,
            unit_price=unit_price,
            total_price=quantity * unit_price,
        )


class Boq(BaseModel):
    """The single live cost estimate for a project."""

    id: int
    project_id: int
    items: list[BoqItem]
    total_cost: float
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @model_validator(mode="after")
    def total_is_sum_of_items(self) -> Boq:
        expected = sum(item.total_price for item in self.items)
        if self.total_cost != expected:
            msg = f"total_cost must equal the sum of item totals, got {self.total_cost} != {expected}"
            raise ValueError(msg)
        return self


class BudgetWarning(BaseModel):
    """Returned alongside a BOQ whose total exceeds the project budget."""

    message: str
    difference: float
