"""
JSON Commons - Normalization utilities for JSON API clients.

Classifies, compares and reshapes JSON-compatible values and turns raw API
metadata (link lists, identifiers, message templates) into readable form.
"""

from .links import LinkCurator, friendly_links
from .types import CloneError, CurationOptions, ErrorType, ProcessingError, ValidationResult
from .utils import (
    ValidationUtils,
    coerce_string,
    compare_string_case_insensitive,
    deep_clone,
    equals,
    is_numeric,
    is_object,
    map_to_array,
    map_values,
    natural_sort_key,
    normalize_url,
    omit,
    pick,
    prettify_string,
    replace_placeholders,
    size,
    unique,
)

__version__ = "1.0.0"
__all__ = [
    "LinkCurator",
    "friendly_links",
    "CloneError",
    "CurationOptions",
    "ErrorType",
    "ProcessingError",
    "ValidationResult",
    "ValidationUtils",
    "coerce_string",
    "compare_string_case_insensitive",
    "deep_clone",
    "equals",
    "is_numeric",
    "is_object",
    "map_to_array",
    "map_values",
    "natural_sort_key",
    "normalize_url",
    "omit",
    "pick",
    "prettify_string",
    "replace_placeholders",
    "size",
    "unique",
]
