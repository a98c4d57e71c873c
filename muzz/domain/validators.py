"""Input validation utilities for muzzle energy calculations."""

import math

from muzz.domain.exceptions import DomainError


class ValidationError(DomainError):
    """Raised when validation fails."""

    pass


def validate_measurement(value: float, name: str = "value") -> float:
    """Validate a physical quantity.

    Args:
        value: Quantity to validate
        name: Name for error messages

    Returns:
        The value as a float

    Raises:
        ValidationError: If the value is not a finite, non-negative number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be numeric, got {type(value).__name__}")

    if not math.isfinite(value):
        raise ValidationError(f"{name} must be finite, got {value}")

    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")

    return float(value)


def validate_constant(k: float) -> float:
    """Validate the divisor constant K.

    Raises:
        ValidationError: If K is not a finite, positive number
    """
    if isinstance(k, bool) or not isinstance(k, (int, float)):
        raise ValidationError(f"Constant must be numeric, got {type(k).__name__}")

    if not math.isfinite(k) or k <= 0:
        raise ValidationError(f"Constant must be a positive finite number, got {k}")

    return float(k)
