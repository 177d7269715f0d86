"""String normalization for URLs, message templates and identifiers."""

import re
from typing import Any, Optional

from ..types import DEFAULT_SEPARATOR, MIN_PRETTIFY_LENGTH, PlaceholderMap
from .classification import coerce_string, is_numeric, is_object


_SNAKE_SEPARATOR = re.compile(r'(?<=[a-zA-Z\d])_(?=[a-zA-Z\d])')
_KEBAB_SEPARATOR = re.compile(r'(?<=[a-zA-Z\d])-(?=[a-zA-Z\d])')
_CAMEL_WORD = re.compile(r'([a-z])([A-Z])(?=[a-z])')
_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z])(?=[A-Z])')


def normalize_url(base_url: Any, path: Optional[str] = None) -> str:
    """
    Normalize a URL, mostly handling leading and trailing slashes.

    Args:
        base_url: The URL to normalize
        path: Optional path to append to the URL

    Returns:
        Normalized URL
    """
    url = coerce_string(base_url)
    if url.endswith("/"):
        url = url[:-1]
    if isinstance(path, str):
        if not path.startswith("/"):
            path = "/" + path
        if path.endswith("/"):
            path = path[:-1]
        url = url + path
    return url


def replace_placeholders(message: Any, variables: Optional[PlaceholderMap] = None) -> Any:
    """
    Replace ``{name}`` placeholders in a message.

    Only the first occurrence of each placeholder is replaced. List values
    are joined with ``"; "``. Anything that is not a string message with a
    mapping of variables is returned as is.

    Args:
        message: The string to replace the placeholders in
        variables: Placeholder names mapped to replacement values

    Returns:
        The message with placeholders replaced
    """
    if not isinstance(message, str) or not is_object(variables):
        return message

    for placeholder, value in variables.items():
        if isinstance(value, (list, tuple)):
            replacement = DEFAULT_SEPARATOR.join(coerce_string(item) for item in value)
        else:
            replacement = coerce_string(value)
        message = message.replace("{" + str(placeholder) + "}", replacement, 1)
    return message


def _prettify_token(token: str, min_length: int) -> str:
    if is_numeric(token) or len(token) < min_length:
        return token

    if "_" in token:
        token = _SNAKE_SEPARATOR.sub(" ", token)
    elif "-" in token:
        token = _KEBAB_SEPARATOR.sub(" ", token)
    else:
        token = _CAMEL_WORD.sub(lambda m: m.group(1) + " " + m.group(2).lower(), token)
        token = _CAMEL_BOUNDARY.sub(" ", token)

    return token[:1].upper() + token[1:]


def prettify_string(value: Any, separator: str = DEFAULT_SEPARATOR,
                    min_length: int = MIN_PRETTIFY_LENGTH) -> str:
    """
    Try to make an identifier more readable.

    Supports converting from snake case (``abc_def``), kebab case
    (``abc-def``) and camel case (``abcDef``). Numeric strings and strings
    shorter than ``min_length`` are returned unchanged.

    Args:
        value: A string or a list of strings
        separator: Joins the results when a list is given
        min_length: Shorter strings are not converted

    Returns:
        The readable string
    """
    if isinstance(value, (list, tuple)):
        return separator.join(prettify_string(item, separator, min_length) for item in value)
    return _prettify_token(coerce_string(value), min_length)
