"""Proportional allocation of a receipt's extras and item costs"""
import math
from typing import Dict, Iterable, Optional

from loguru import logger

from receipt_split.class_models import Receipt, ReceiptBreakdown
from receipt_split.config import settings
from receipt_split.errors import ConsistencyError, DegenerateReceiptError


def compute_item_costs(receipt: Receipt) -> Dict[str, float]:
    """
    Fold the extras into each item in proportion to its price.

    Each item costs ``price + price * total_extras / total_item_price``, so the
    adjusted costs add up to the item prices plus all extras.

    Returns:
        Dictionary of item name -> adjusted cost, sorted by item name

    Raises:
        DegenerateReceiptError: extras are nonzero but every item is free,
            or the amounts overflow
    """
    total_extras = receipt.total_extras()
    total_items = receipt.total_item_price()
    logger.debug(f"Total item price: {total_items}, total extras: {total_extras}")

    if not (math.isfinite(total_items) and math.isfinite(total_extras)):
        raise DegenerateReceiptError(
            f"Item prices ({total_items}) or extras ({total_extras}) overflow when summed"
        )

    if total_items == 0:
        if total_extras != 0:
            raise DegenerateReceiptError(
                f"Cannot distribute {total_extras:.2f} of extras: the item prices sum to zero"
            )
        # Nothing to spread
        return {name: receipt.items[name].price for name in sorted(receipt.items)}

    item_costs = {}
    for name in sorted(receipt.items):
        price = receipt.items[name].price
        item_costs[name] = price + price * total_extras / total_items
        logger.debug(f"Item '{name}': price {price} -> cost {item_costs[name]}")
        if not math.isfinite(item_costs[name]):
            raise DegenerateReceiptError(f"Adjusted cost of item '{name}' overflows", item=name)
    return item_costs


def compute_person_shares(
    receipt: Receipt,
    item_costs: Optional[Dict[str, float]] = None,
) -> Dict[str, float]:
    """
    Distribute each item's adjusted cost among its people by weight.

    A person's share of an item is ``weight / sum(weights) * item_cost``;
    shares from every item the person appears in are summed.

    Args:
        receipt: Parsed receipt
        item_costs: Output of compute_item_costs, computed if not given

    Returns:
        Dictionary of person name -> amount owed, sorted by person name

    Raises:
        DegenerateReceiptError: an item with a nonzero cost has no weight to split it by
    """
    if item_costs is None:
        item_costs = compute_item_costs(receipt)

    shares: Dict[str, float] = {}
    for name in sorted(receipt.items):
        people = receipt.items[name].people
        cost = item_costs[name]
        weight_sum = sum(people.values())

        if not math.isfinite(weight_sum):
            raise DegenerateReceiptError(f"People weights of item '{name}' overflow when summed", item=name)

        if weight_sum == 0:
            if cost != 0:
                raise DegenerateReceiptError(
                    f"Item '{name}' costs {cost:.2f} but its people weights sum to zero",
                    item=name,
                )
            for person in people:
                shares.setdefault(person, 0.0)
            continue

        for person, weight in people.items():
            shares[person] = shares.get(person, 0.0) + weight / weight_sum * cost

    return {person: shares[person] for person in sorted(shares)}


def check_consistency(
    label: str,
    amounts: Iterable[float],
    expected: float,
    tolerance: float,
) -> float:
    """Check that amounts add up to the expected total; returns their sum."""
    computed = sum(amounts)
    # NaN never compares within tolerance
    if not abs(computed - expected) <= tolerance:
        raise ConsistencyError(label, computed, expected, tolerance)
    return computed


def split_receipt(
    receipt: Receipt,
    tolerance: Optional[float] = None,
) -> ReceiptBreakdown:
    """
    Compute item costs and person shares and check both against the receipt total.

    Args:
        receipt: Parsed receipt
        tolerance: Allowed absolute difference from ``receipt.total``,
            defaults to settings.consistency_tolerance

    Returns:
        ReceiptBreakdown with item costs and person shares

    Raises:
        DegenerateReceiptError: the receipt cannot be split without dividing by zero
        ConsistencyError: a computed sum disagrees with the declared total
    """
    if tolerance is None:
        tolerance = settings.consistency_tolerance

    item_costs = compute_item_costs(receipt)
    person_shares = compute_person_shares(receipt, item_costs)

    items_total = check_consistency("item costs", item_costs.values(), receipt.total, tolerance)
    shares_total = check_consistency("person shares", person_shares.values(), receipt.total, tolerance)

    logger.info("--- Receipt Breakdown ---")
    for person, share in person_shares.items():
        logger.info(f"{person}: ${share:.2f}")
    logger.info(f"Items total: ${items_total:.2f}, shares total: ${shares_total:.2f}, "
                f"receipt total: ${receipt.total:.2f}")

    return ReceiptBreakdown(item_costs=item_costs, person_shares=person_shares)
