"""
Stay price calculation for the payment confirmation step.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from ...core.models.booking import PriceQuote

Number = Union[Decimal, int, float, str]

_CENTS = Decimal("0.01")
DEFAULT_TAX_RATE = Decimal("0.10")


def money(value: Number) -> Decimal:
    return Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP)


def quote_stay(
    price_per_night: Number,
    nights: int,
    *,
    discount_price: Optional[Number] = None,
    tax_rate: Number = DEFAULT_TAX_RATE,
) -> PriceQuote:
    """
    Price a stay.

    The discounted nightly price is charged when present; the discount line
    is the saving against the list price. Taxes are a flat rate on the
    subtotal.

    Args:
        price_per_night: List price per night
        nights: Number of nights, zero or more
        discount_price: Optional discounted price per night
        tax_rate: Tax rate applied to the subtotal

    Returns:
        PriceQuote with amounts rounded to cents
    """
    if nights < 0:
        raise ValueError(f"nights must be non-negative, got {nights}")

    list_price = Decimal(str(price_per_night))
    charged = Decimal(str(discount_price)) if discount_price else list_price

    subtotal = charged * nights
    discount = list_price * nights - subtotal
    taxes = subtotal * Decimal(str(tax_rate))

    return PriceQuote(
        nights=nights,
        subtotal=money(subtotal),
        discount=money(discount),
        taxes=money(taxes),
        total=money(subtotal + taxes),
    )
