"""
Display helpers for token amounts.

Amounts stay integers everywhere except at the display boundary. Conversion
itself is done by ``Web3.from_wei`` / ``Web3.to_wei``; ZIR has 6 decimals,
which is the ``mwei`` unit.
"""

import re
from decimal import Decimal

from web3 import Web3

# Plain non-negative decimal: no exponent, sign or digit separators
_DECIMAL_RE = re.compile(r"^[0-9]+(\.[0-9]+)?$")


def format_units(value: int, unit: str = "mwei") -> str:
    """
    Renders ``value`` base units in ``unit``, always with a fractional part,
    e.g. ``format_units(100000000000) == "100000.0"``.
    """
    text = format(Decimal(Web3.from_wei(value, unit)), "f")
    if "." not in text:
        text += ".0"
    return text


def parse_units(value: str, unit: str = "mwei") -> int:
    """
    Converts operator input such as ``"100000.0"`` back into base units.
    Raises ValueError for anything that is not a plain decimal or that has
    more precision than ``unit`` allows.
    """
    text = str(value).strip()
    if not _DECIMAL_RE.match(text):
        raise ValueError(f"invalid decimal value: {value!r}")

    amount = Web3.to_wei(text, unit)
    if Web3.from_wei(amount, unit) != Decimal(text):
        raise ValueError(f"fractional component exceeds {unit} precision: {value!r}")
    return amount
