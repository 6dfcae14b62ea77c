import math
from typing import Optional

# Characters that may continue a numeric literal once a digit has started it
NUMBER_CHARACTERS = frozenset("0123456789.,")


def is_number_character(char: str) -> bool:
    """Check if a character can continue a numeric literal."""
    return char in NUMBER_CHARACTERS or char.isdigit()


def _strip_grouping(text: str) -> str:
    """Remove thousands separators (e.g. '1,000' -> '1000')."""
    return text.replace(",", "")


def parse_number(text: str) -> Optional[float]:
    """Parse a scanned numeric run into a finite float.

    Args:
        text: Run of digits, dots and commas as it appeared in the source.

    Returns:
        The value as a float, or None if the run is not a valid finite number.

    Examples:
        >>> parse_number("1,250.5")
        1250.5
        >>> parse_number("1.2.3") is None
        True
    """
    try:
        value = float(_strip_grouping(text))
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value
