"""Lenient scalar extraction from JSON-like response text.

The extractor does not parse JSON. It looks for the first quoted
occurrence of a key anywhere in the text and slices out the value that
follows it, so it cannot tell nested keys from top-level ones and it
truncates string values that contain a comma or a closing brace.
"""

import re
from typing import Optional

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

# a 32-bit value never needs more digits than this
MAX_DIGITS = 10

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def extract_scalar(text: str, key: str) -> Optional[str]:
    """
    Extract the raw scalar value of ``key`` from ``text``.

    Args:
        text: Serialized JSON object or array of objects
        key: Field name to look for (no nesting support)

    Returns:
        The value with surrounding whitespace, double quotes and spaces
        trimmed, or None if the key or its colon cannot be found.
    """
    key_index = text.find(f'"{key}"')
    if key_index == -1:
        return None

    colon_index = text.find(":", key_index)
    if colon_index == -1:
        return None
    start = colon_index + 1

    comma_index = text.find(",", start)
    brace_index = text.find("}", start)
    if comma_index != -1 and (brace_index == -1 or comma_index < brace_index):
        end = comma_index
    elif brace_index != -1:
        end = brace_index
    else:
        end = len(text)

    return text[start:end].strip().strip('" ')


def to_int(value: Optional[str]) -> int:
    """Parse a 32-bit decimal integer, falling back to 0."""
    if value is None or not _INTEGER_PATTERN.fullmatch(value):
        return 0
    if len(value.lstrip("+-").lstrip("0")) > MAX_DIGITS:
        return 0
    number = int(value)
    if number < INT_MIN or number > INT_MAX:
        return 0
    return number


def to_optional(value: Optional[str]) -> Optional[str]:
    """Map the literal ``null`` token to an absent value."""
    if value is None or value == "null":
        return None
    return value
