"""
Display formatting.

Amounts are shown with two decimals and a currency symbol. There is no
locale handling.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union


_CENTS = Decimal("0.01")


def format_money(value: Union[Decimal, int, float], symbol: str = "$") -> str:
    """
    Two-decimal amount with the symbol in front: 190 -> "$190.00".

    Negative amounts put the sign before the symbol: "-$5.00".
    """
    amount = Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP)
    if amount < 0:
        return f"-{symbol}{-amount:,.2f}"
    return f"{symbol}{amount:,.2f}"
