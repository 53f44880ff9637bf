import logging
from decimal import Decimal, DecimalException, ROUND_CEILING

from tipcalculator.formatting import format_money

logger = logging.getLogger(__name__)

DEFAULT_TIP_PERCENT = 15.0


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def calculate_tip_amount(amount, tip_percent=DEFAULT_TIP_PERCENT, round_up: bool = False) -> Decimal:
    """Return the unformatted tip for `amount` at `tip_percent` percent.

    With `round_up` the tip is rounded up to the next whole currency unit.
    NaN or infinite inputs, and results outside Decimal's exponent range,
    yield a zero tip.
    """
    a = _to_decimal(amount)
    p = _to_decimal(tip_percent)
    if not (a.is_finite() and p.is_finite()):
        logger.warning(f"Non-finite input amount={amount!r} percent={tip_percent!r}; tip is 0")
        return Decimal("0")

    try:
        tip = p / Decimal("100") * a
        if round_up:
            tip = tip.to_integral_value(rounding=ROUND_CEILING)
    except DecimalException as e:
        logger.warning(f"Tip out of range for amount={amount!r} percent={tip_percent!r} ({type(e).__name__}); tip is 0")
        return Decimal("0")
    # -0 would otherwise render with a minus sign
    if tip.is_zero():
        return Decimal("0")
    return tip


def compute_tip(amount, tip_percent=DEFAULT_TIP_PERCENT, round_up: bool = False, locale=None) -> str:
    """Return the tip as a currency string for the active locale."""
    tip = calculate_tip_amount(amount, tip_percent, round_up)
    formatted = format_money(tip, locale)
    logger.debug(f"Tip for amount={amount} percent={tip_percent} round_up={round_up}: {formatted}")
    return formatted
