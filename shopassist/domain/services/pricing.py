import re
from typing import Optional

from shopassist.domain.errors import PriceParseError

# Everything that is not a digit or a decimal point (currency symbols,
# thousands separators, spaces)
_NON_NUMERIC = re.compile(r"[^0-9.]")


def parse_price(text: Optional[str]) -> float:
    """
    Parse a currency string like "$1,299.00" or "₹999" into a float.
    Commas are treated as thousands separators, never as decimal points.
    Raises PriceParseError when nothing numeric is left.
    """
    if text is None:
        raise PriceParseError("price is missing")
    cleaned = _NON_NUMERIC.sub("", str(text))
    if not cleaned or cleaned == ".":
        raise PriceParseError(f"no numeric amount in {text!r}")
    try:
        return float(cleaned)
    except ValueError as e:
        raise PriceParseError(f"malformed amount {text!r}") from e


def discount_amount(product) -> Optional[float]:
    """
    Absolute discount (price - final_price) when both prices parse and the
    final price is strictly lower; None otherwise.
    """
    try:
        price = parse_price(product.price)
        final = parse_price(product.final_price)
    except PriceParseError:
        return None
    diff = price - final
    return diff if diff > 0 else None
