"""Value utilities for JSON Commons."""

from .classification import (
    coerce_string,
    compare_string_case_insensitive,
    equals,
    is_numeric,
    is_object,
    natural_sort_key,
)
from .objects import deep_clone, map_to_array, map_values, omit, pick, size, unique
from .strings import normalize_url, prettify_string, replace_placeholders
from .validation import ValidationUtils

__all__ = [
    "coerce_string",
    "compare_string_case_insensitive",
    "equals",
    "is_numeric",
    "is_object",
    "natural_sort_key",
    "deep_clone",
    "map_to_array",
    "map_values",
    "omit",
    "pick",
    "size",
    "unique",
    "normalize_url",
    "prettify_string",
    "replace_placeholders",
    "ValidationUtils",
]
