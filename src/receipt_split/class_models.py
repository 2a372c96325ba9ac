from typing import Annotated, Dict

from pydantic import BaseModel, ConfigDict, PlainSerializer

from receipt_split.money import format_money


# Amounts stay floats in Python and become fixed 2-decimal strings in JSON
Money = Annotated[float, PlainSerializer(format_money, return_type=str, when_used="json")]


class Item(BaseModel):
    """A receipt line and the weighted set of people who shared it."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    price: float
    people: Dict[str, float]  # person -> weight


class Receipt(BaseModel):
    """Parsed receipt: items, shared extras (tax, tip, fees) and the declared total."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    items: Dict[str, Item]
    extras: Dict[str, float]  # extra name -> amount
    total: float  # only used to check the computed sums

    def total_item_price(self) -> float:
        """Sum of base item prices."""
        return sum(item.price for item in self.items.values())

    def total_extras(self) -> float:
        """Sum of all extras."""
        return sum(self.extras.values())


class ReceiptBreakdown(BaseModel):
    """Computed split, with every mapping sorted by key."""
    item_costs: Dict[str, Money]
    person_shares: Dict[str, Money]
