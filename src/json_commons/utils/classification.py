"""Classification and comparison primitives for JSON-compatible values."""

import math
import re
import unicodedata
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, List, Union


_NUMBER_PATTERN = re.compile(r'^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$')
_DIGIT_RUN = re.compile(r'(\d+)')


def is_object(value: Any) -> bool:
    """
    Check whether a value is a real object (a mapping).

    Lists, tuples, ``None`` and scalars are not objects.

    Args:
        value: Value to check

    Returns:
        True if the value is a mapping
    """
    return isinstance(value, Mapping)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def equals(x: Any, y: Any) -> bool:
    """
    Compare two values for deep structural equality.

    Mappings are compared without regard to key order, sequences element by
    element. Booleans never equal numbers, while ints and floats compare by
    value. NaN equals NaN.

    Args:
        x: First value
        y: Second value

    Returns:
        True if both values have the same structure and scalar values
    """
    if x is y:
        return True

    if isinstance(x, bool) or isinstance(y, bool):
        return isinstance(x, bool) and isinstance(y, bool) and x == y

    if _is_number(x) and _is_number(y):
        if isinstance(x, float) and isinstance(y, float) and math.isnan(x) and math.isnan(y):
            return True
        return x == y

    if is_object(x) and is_object(y):
        if len(x) != len(y):
            return False
        for key in x:
            if key not in y:
                return False
            if not equals(x[key], y[key]):
                return False
        return True

    if _is_sequence(x) and _is_sequence(y):
        if len(x) != len(y):
            return False
        return all(equals(a, b) for a, b in zip(x, y))

    if is_object(x) or is_object(y) or _is_sequence(x) or _is_sequence(y):
        return False

    if type(x) is not type(y):
        return False

    return x == y


def is_numeric(value: Any) -> bool:
    """
    Check whether a value is numeric.

    Numbers and strings holding a well-formed decimal number count as
    numeric, as long as they are finite. Booleans, NaN and infinity do not.

    Args:
        value: Value to check

    Returns:
        True if the value is numeric
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, str):
        if not _NUMBER_PATTERN.match(value):
            return False
        return math.isfinite(float(value))
    return False


def _format_float(value: float) -> str:
    """Format a float like a JavaScript number."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    text = repr(value)
    if 1e-7 <= abs(value) < 1e21:
        text = format(Decimal(text), 'f')
        if '.' in text:
            text = text.rstrip('0').rstrip('.')
        return text
    mantissa, exponent = text.split('e')
    exponent = int(exponent)
    return f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


def coerce_string(value: Any) -> str:
    """
    Convert any value to its string representation.

    ``None`` becomes ``"null"``, booleans become ``"true"``/``"false"`` and
    sequences are joined with commas. Floats are written the way JavaScript
    prints numbers: integral floats lose their trailing ``.0``, infinities
    become ``"Infinity"``/``"-Infinity"``, NaN becomes ``"NaN"`` and
    magnitudes from ``1e21`` up or below ``1e-7`` use exponent notation
    (``"1e+21"``, ``"1.5e-8"``).
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if _is_sequence(value):
        return ",".join("" if item is None else coerce_string(item) for item in value)
    return str(value)


def _fold(text: str) -> str:
    """Casefold and strip accents so only base letters are compared."""
    decomposed = unicodedata.normalize('NFKD', text.casefold())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def natural_sort_key(value: Any) -> List[Union[str, int]]:
    """
    Build a sort key with case-insensitive, natural ordering of digit runs.

    The key alternates text and integer chunks and always starts with a
    text chunk, so keys of different strings compare chunk by chunk.

    Args:
        value: Value to build the key for (coerced to string)

    Returns:
        List of alternating text and integer chunks
    """
    parts = _DIGIT_RUN.split(_fold(coerce_string(value)))
    return [int(part) if index % 2 else part for index, part in enumerate(parts)]


def compare_string_case_insensitive(a: Any, b: Any) -> int:
    """
    Compare two strings case-insensitively with natural number ordering.

    Non-string arguments are coerced to strings first. Usable with
    ``functools.cmp_to_key``.

    Args:
        a: First value
        b: Second value

    Returns:
        Negative if a sorts first, positive if b sorts first, 0 if equal
    """
    key_a = natural_sort_key(a)
    key_b = natural_sort_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0
