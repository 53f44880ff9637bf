"""Locale-aware currency formatting backed by Babel's CLDR data."""
import logging
import os
from decimal import Decimal
from typing import Optional, Union

from babel import Locale, UnknownLocaleError, default_locale
from babel.numbers import format_currency, get_territory_currencies

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en_US"
DEFAULT_CURRENCY = "USD"
LOCALE_ENV_VAR = "TIP_LOCALE"

# C / POSIX environments carry no monetary conventions
_POSIX_LOCALES = {"en_US_POSIX", "C", "POSIX"}


def _parse_locale(identifier: str) -> Optional[Locale]:
    try:
        return Locale.parse(identifier.strip().replace("-", "_"))
    except (ValueError, TypeError, UnknownLocaleError) as e:
        logger.warning(f"Unknown locale {identifier!r}: {e}. Falling back to {DEFAULT_LOCALE}.")
        return None


def resolve_locale(locale: Union[str, Locale, None] = None) -> Locale:
    """Return the Babel locale used for currency formatting.

    Lookup order: the explicit `locale` argument, the TIP_LOCALE environment
    variable, the process default locale, then en_US. Unknown identifiers
    fall back to en_US instead of raising.
    """
    if isinstance(locale, Locale):
        return locale

    identifier = locale or os.environ.get(LOCALE_ENV_VAR)
    if not identifier:
        identifier = default_locale("LC_MONETARY")
    if not identifier or identifier in _POSIX_LOCALES:
        identifier = DEFAULT_LOCALE

    return _parse_locale(identifier) or Locale.parse(DEFAULT_LOCALE)


def currency_for_locale(locale: Locale) -> str:
    """Return the ISO 4217 code of the tender currency used in `locale`'s territory."""
    if not locale.territory:
        return DEFAULT_CURRENCY
    currencies = get_territory_currencies(locale.territory, tender=True)
    if not currencies:
        logger.debug(f"No tender currency for territory {locale.territory}; using {DEFAULT_CURRENCY}")
        return DEFAULT_CURRENCY
    return currencies[0]


def format_money(value: Union[Decimal, float, int], locale: Union[str, Locale, None] = None) -> str:
    """Format `value` with the currency symbol, grouping and decimals of the locale."""
    loc = resolve_locale(locale)
    return format_currency(value, currency_for_locale(loc), locale=loc)
