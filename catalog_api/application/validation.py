"""Field checks shared by the catalog services."""

import math
from typing import Any

from catalog_api.domain.exceptions import ValidationError


def require_text(value: Any, field: str, message: str) -> str:
    """Ensure a required text field is present and not blank.

    Args:
        value: Field value to check.
        field: Field name for error details.
        message: Error message when the check fails.

    Returns:
        The value, unchanged.

    Raises:
        ValidationError: If the value is missing or blank.
    """
    if value is None or not str(value).strip():
        raise ValidationError(message, field=field)
    return value


def require_non_negative(value: Any, field: str, message: str) -> None:
    """Ensure an optional numeric field is a finite number not below zero.

    Raises:
        ValidationError: If the value is negative or not finite.
    """
    if value is not None and (not math.isfinite(value) or value < 0):
        raise ValidationError(message, field=field)
