# pages/parsing.py
import re

_NOT_PRICE = re.compile(r"[^0-9.]")


def parse_price(text: str) -> float:
    """'Item total: $29.99' -> 29.99"""
    digits = _NOT_PRICE.sub("", text or "")
    if not digits:
        raise ValueError(f"No price in {text!r}")
    return float(digits)
