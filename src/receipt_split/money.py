"""Fixed two-decimal money formatting.

Amounts are rounded from their shortest decimal representation, so ``0.125``
is treated as exactly one hundred twenty-five thousandths rather than as the
nearby binary float. Ties round to even: ``0.125 -> "0.12"``, ``0.135 -> "0.14"``.
"""
import math
from decimal import ROUND_HALF_EVEN, Decimal, localcontext

CENT = Decimal("0.01")


def format_money(amount: float) -> str:
    """Format an amount as a string with exactly two decimals.

    Args:
        amount: Finite monetary amount. Negative values keep a leading minus.

    Returns:
        e.g. ``"0.50"``, ``"12.00"``, ``"-3.25"``. Never ``".50"`` or ``"-0.00"``.
    """
    if not math.isfinite(amount):
        raise ValueError(f"Cannot format non-finite amount: {amount}")

    exact = Decimal(repr(float(amount)))
    with localcontext() as ctx:
        # Enough digits for every integer digit plus two decimals
        ctx.prec = max(28, exact.adjusted() + 3)
        cents = exact.quantize(CENT, rounding=ROUND_HALF_EVEN)
    if cents.is_zero():
        cents = cents.copy_abs()
    return format(cents, "f")
