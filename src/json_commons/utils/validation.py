"""Validation utilities for JSON compatibility and link lists."""

import json
from collections.abc import Mapping
from typing import Any, List, Set, Tuple

from ..types import ErrorType, MAX_NESTING_DEPTH, ValidationError, ValidationResult


class ValidationUtils:
    """Utility class for checking that values can be represented as JSON."""

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON string syntax and the decoded value.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)
        except RecursionError:
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message="JSON is nested too deeply to decode",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        return ValidationUtils.validate_json_value(data)

    @staticmethod
    def validate_json_value(data: Any) -> ValidationResult:
        """
        Validate that an in-memory value is JSON-compatible.

        Reports circular references, unsupported types and non-string keys,
        and warns about very deep nesting.

        Args:
            data: Value to validate

        Returns:
            ValidationResult with validation details
        """
        errors: List[ValidationError] = []
        warnings: List[str] = []

        try:
            circular = ValidationUtils.has_circular_references(data)
            unsupported = ValidationUtils._find_unsupported_values(data, "root")
            max_depth = ValidationUtils._calculate_max_depth(data)
        except RecursionError:
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message="Value is nested too deeply to validate",
                location="root"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if circular:
            errors.append(ValidationError(
                type=ErrorType.CIRCULAR,
                message="Circular references detected in value",
                location="root"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        errors.extend(unsupported)

        if max_depth > MAX_NESTING_DEPTH:
            warnings.append(f"Deep nesting detected (depth: {max_depth}).")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def validate_link_list(links: Any) -> ValidationResult:
        """
        Validate the shape of a link list from an API response.

        Args:
            links: Value expected to be a list of link records

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not isinstance(links, (list, tuple)):
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message=f"Link list must be a list, got {type(links).__name__}",
                location="links"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        for index, link in enumerate(links):
            location = f"links[{index}]"
            if not isinstance(link, Mapping):
                errors.append(ValidationError(
                    type=ErrorType.STRUCTURE,
                    message=f"Link must be an object, got {type(link).__name__}",
                    location=location
                ))
                continue

            if not isinstance(link.get("href"), str):
                errors.append(ValidationError(
                    type=ErrorType.STRUCTURE,
                    message="Link is missing a string 'href'",
                    location=f"{location}.href"
                ))

            for key in ("rel", "title"):
                if key in link and not isinstance(link[key], str):
                    errors.append(ValidationError(
                        type=ErrorType.STRUCTURE,
                        message=f"'{key}' must be a string",
                        location=f"{location}.{key}"
                    ))

            if "rel" not in link:
                warnings.append(f"{location} has no 'rel'")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def has_circular_references(data: Any, seen: Set[int] = None) -> bool:
        """Check for circular references in data structure."""
        if seen is None:
            seen = set()

        if isinstance(data, (Mapping, list, tuple)):
            obj_id = id(data)
            if obj_id in seen:
                return True
            seen.add(obj_id)

            children = data.values() if isinstance(data, Mapping) else data
            for child in children:
                if ValidationUtils.has_circular_references(child, seen):
                    return True

            seen.remove(obj_id)

        return False

    @staticmethod
    def _find_unsupported_values(data: Any, location: str) -> List[ValidationError]:
        """Collect errors for values and keys JSON can't represent."""
        errors = []

        if data is None or isinstance(data, (bool, int, float, str)):
            return errors

        if isinstance(data, Mapping):
            for key, value in data.items():
                if not isinstance(key, str):
                    errors.append(ValidationError(
                        type=ErrorType.STRUCTURE,
                        message=f"Object key must be a string, got {type(key).__name__}",
                        location=location
                    ))
                errors.extend(ValidationUtils._find_unsupported_values(value, f"{location}.{key}"))
        elif isinstance(data, (list, tuple)):
            for index, item in enumerate(data):
                errors.extend(ValidationUtils._find_unsupported_values(item, f"{location}[{index}]"))
        else:
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message=f"Unsupported type {type(data).__name__}",
                location=location
            ))

        return errors

    @staticmethod
    def _calculate_max_depth(data: Any, current_depth: int = 0) -> int:
        """Calculate maximum nesting depth."""
        if isinstance(data, Mapping):
            children = data.values()
        elif isinstance(data, (list, tuple)):
            children = data
        else:
            return current_depth

        max_child_depth = current_depth
        for child in children:
            child_depth = ValidationUtils._calculate_max_depth(child, current_depth + 1)
            max_child_depth = max(max_child_depth, child_depth)

        return max_child_depth


def format_validation_result(result: ValidationResult) -> Tuple[List[str], List[str]]:
    """Render a validation result as (error lines, warning lines)."""
    error_lines = [f"{error.type.value} at {error.location}: {error.message}" for error in result.errors]
    return error_lines, list(result.warnings)
