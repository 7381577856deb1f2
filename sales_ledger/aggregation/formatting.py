"""
Display formatting for amounts and margins.

Amounts render as whole yen with grouping commas, margins as a
percentage with one decimal place. Both round half up.
"""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation

YEN = "￥"

_WHOLE = Decimal("1")
_ONE_DECIMAL = Decimal("0.1")


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps floats from dragging binary noise into rounding
    return Decimal(str(value))


def format_currency(amount) -> str:
    """150000 -> '￥150,000', -40000 -> '-￥40,000'."""
    try:
        value = _to_decimal(amount).quantize(_WHOLE, rounding=ROUND_HALF_UP)
        sign = "-" if value < 0 else ""
    except InvalidOperation:
        return f"{YEN}{amount}"
    return f"{sign}{YEN}{abs(value):,}"


def format_percent(ratio) -> str:
    """0.7333 -> '73.3%'."""
    try:
        value = (_to_decimal(ratio) * 100).quantize(
            _ONE_DECIMAL, rounding=ROUND_HALF_UP
        )
    except InvalidOperation:
        return f"{ratio}%"
    return f"{value:.1f}%"
