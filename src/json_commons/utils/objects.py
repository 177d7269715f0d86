"""Object shaping and collection helpers for JSON-compatible values."""

import json
import logging
from typing import Any, Callable, Dict, Hashable, List, Mapping, Sequence, Tuple, Union

from ..types import CloneError, ErrorType
from .classification import equals, is_object
from .validation import ValidationUtils


logger = logging.getLogger(__name__)

Keys = Union[str, Sequence[str]]


def _as_key_list(keys: Keys) -> List[str]:
    if isinstance(keys, str):
        return [keys]
    return list(keys)


def pick(obj: Mapping[str, Any], keys: Keys) -> Dict[str, Any]:
    """
    Create a shallow copy holding only the given keys.

    Keys missing from ``obj`` are present in the result with value ``None``.

    Args:
        obj: Mapping to pick from
        keys: A single key or a sequence of keys

    Returns:
        New dictionary with exactly the requested keys, in request order
    """
    source = obj if is_object(obj) else {}
    return {key: source.get(key) for key in _as_key_list(keys)}


def omit(obj: Mapping[str, Any], keys: Keys) -> Dict[str, Any]:
    """
    Create a shallow copy without the given keys.

    Args:
        obj: Mapping to copy
        keys: A single key or a sequence of keys to leave out

    Returns:
        New dictionary with the remaining keys
    """
    if not is_object(obj):
        return {}
    excluded = set(_as_key_list(keys))
    return {key: value for key, value in obj.items() if key not in excluded}


def map_values(obj: Mapping[str, Any], fn: Callable[[Any, str, Mapping[str, Any]], Any]) -> Dict[str, Any]:
    """Return a dictionary with the same keys and values replaced by ``fn(value, key, obj)``."""
    return {key: fn(value, key, obj) for key, value in obj.items()}


def map_to_array(obj: Mapping[str, Any], fn: Callable[[Any, str, Mapping[str, Any]], Any]) -> List[Any]:
    """Return ``fn(value, key, obj)`` for every entry, in key order."""
    return [fn(value, key, obj) for key, value in obj.items()]


def _identity_key(item: Any) -> Tuple[str, Hashable]:
    """Key for shallow deduplication: primitives by value, everything else by identity."""
    if item is None:
        return ("null", None)
    if isinstance(item, bool):
        return ("bool", item)
    if isinstance(item, (int, float)):
        # all NaNs collapse into one entry
        if item != item:
            return ("nan", None)
        return ("number", item)
    if isinstance(item, str):
        return ("string", item)
    return ("ref", id(item))


def unique(seq: Sequence[Any], use_deep_equals: bool = False) -> List[Any]:
    """
    Remove duplicates while keeping the first occurrence of each item.

    Args:
        seq: List or tuple to deduplicate
        use_deep_equals: Compare items with deep structural equality instead
            of primitive value / identity. Needed for lists of objects.

    Returns:
        New list without duplicates, empty for non-sequence input
    """
    if not isinstance(seq, (list, tuple)):
        logger.debug(f"unique() got {type(seq).__name__}, returning empty list")
        return []

    result: List[Any] = []
    if use_deep_equals:
        for item in seq:
            if not any(equals(item, kept) for kept in result):
                result.append(item)
        return result

    seen = set()
    for item in seq:
        key = _identity_key(item)
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


def size(value: Any) -> int:
    """
    Count the elements of a list or the keys of a mapping.

    Returns 0 for all other types, including ``None`` and strings.
    """
    if isinstance(value, (list, tuple)) or is_object(value):
        return len(value)
    return 0


def deep_clone(value: Any) -> Any:
    """
    Deep clone JSON-compatible data through a JSON round trip.

    Tuples come back as lists and non-string keys as strings, as they would
    after any JSON serialization.

    Args:
        value: Data to clone

    Returns:
        Independent copy of the data

    Raises:
        CloneError: If the data contains cycles or values JSON can't represent
    """
    try:
        return json.loads(json.dumps(value, ensure_ascii=False))
    except (TypeError, ValueError, RecursionError) as e:
        try:
            circular = ValidationUtils.has_circular_references(value)
        except RecursionError:
            circular = False
        if circular:
            error_type = ErrorType.CIRCULAR
            message = "Cannot clone data with circular references"
        else:
            error_type = ErrorType.SERIALIZATION
            message = f"Data is not JSON serializable: {str(e)}"
        logger.error(message)
        raise CloneError(message, error_type, context={"type": type(value).__name__}) from e
