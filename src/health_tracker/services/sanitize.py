"""Type guards and normalization for loosely typed model output."""

import math
import unicodedata

MAX_TEXT_LENGTH = 255


def sanitize_text(value: object, max_length: int = MAX_TEXT_LENGTH) -> str:
    """Return a trimmed, control-free string, or an empty string for non-strings."""
    if not isinstance(value, str):
        return ""
    cleaned = "".join(
        " " if unicodedata.category(char) == "Cc" else char for char in value
    )
    return cleaned.strip()[:max_length].rstrip()


def to_number(value: object) -> float | None:
    """Coerce ints, floats and numeric strings to a finite float."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up."""
    return math.floor(value + 0.5)


def non_negative_int(value: object) -> int:
    """Round a numeric value and clamp it at zero; non-numbers become zero."""
    number = to_number(value)
    if number is None:
        return 0
    return max(0, round_half_up(number))
