"""Core type definitions and defaults for JSON Commons."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union


JSONScalar = Union[None, bool, int, float, str]
JSONValue = Union[JSONScalar, List[Any], Tuple[Any, ...], Mapping[str, Any]]
LinkRecord = Dict[str, Any]
PlaceholderMap = Mapping[str, Union[str, Sequence[str]]]

DEFAULT_SEPARATOR = "; "
DEFAULT_IGNORE_REL: Tuple[str, ...] = ("self",)
MIN_PRETTIFY_LENGTH = 2
MAX_NESTING_DEPTH = 20


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    STRUCTURE = "structure"
    CIRCULAR = "circular"
    SERIALIZATION = "serialization"


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of a validation run."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class CurationOptions:
    """Settings for link-list curation."""
    sort: bool = True
    ignore_rel: Union[str, Sequence[str]] = field(default_factory=lambda: list(DEFAULT_IGNORE_REL))
    separator: str = DEFAULT_SEPARATOR
    min_length: int = MIN_PRETTIFY_LENGTH


class ProcessingError(Exception):
    """Custom exception for processing errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class CloneError(ProcessingError):
    """Raised when a value cannot be deep-cloned through JSON."""
