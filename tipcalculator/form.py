"""State of the single-screen tip form and the parsing of its text fields."""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from tipcalculator.core import calculate_tip_amount, compute_tip

logger = logging.getLogger(__name__)

TRUTHY = {"1", "true", "on", "yes"}


def parse_number(text: Optional[str]) -> float:
    """Parse a text field as a number, returning 0.0 when empty or unparsable."""
    if text is None:
        return 0.0
    try:
        return float(text)
    except (TypeError, ValueError):
        logger.debug(f"Could not parse {text!r} as a number; using 0.0")
        return 0.0


def parse_flag(text: Optional[str]) -> bool:
    return str(text or "").strip().lower() in TRUTHY


@dataclass
class TipForm:
    """Raw inputs of the form: bill text, percent text and the round-up switch."""

    amount_input: str = ""
    tip_input: str = ""
    round_up: bool = False
    locale: Optional[str] = None

    @property
    def amount(self) -> float:
        return parse_number(self.amount_input)

    @property
    def tip_percent(self) -> float:
        return parse_number(self.tip_input)

    @property
    def tip_value(self) -> Decimal:
        return calculate_tip_amount(self.amount, self.tip_percent, self.round_up)

    @property
    def tip(self) -> str:
        return compute_tip(self.amount, self.tip_percent, self.round_up, locale=self.locale)
