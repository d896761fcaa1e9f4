"""Input guards shared by every calculator.

Each guard raises `ValidationError` on the first violation, with a message
naming the field and the constraint.
"""

import math
from numbers import Real
from typing import Any, Iterable

from core.exceptions import ValidationError

GENDERS = ("male", "female")


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def require_positive_finite(value: Any, field: str) -> None:
    """Fail unless `value` is a finite number greater than 0."""
    if not _is_number(value) or not math.isfinite(value):
        raise ValidationError(f"{field} must be a valid number", field=field)
    if value <= 0:
        raise ValidationError(f"{field} must be greater than 0", field=field)


def require_range(value: Any, minimum: float, maximum: float, field: str) -> None:
    """Fail unless `value` is positive, finite and within [minimum, maximum]."""
    require_positive_finite(value, field)
    if value < minimum or value > maximum:
        raise ValidationError(f"{field} must be between {minimum} and {maximum}", field=field)


def require_gender(value: Any) -> None:
    """Fail unless `value` is "male" or "female"."""
    if value not in GENDERS:
        raise ValidationError('Gender must be "male" or "female"', field="Gender")


def require_choice(value: Any, choices: Iterable[str], field: str) -> None:
    """Fail unless `value` is one of `choices`."""
    choices = tuple(choices)
    if value not in choices:
        raise ValidationError(f"{field} must be one of: {', '.join(choices)}", field=field)


def require_percentage(value: Any, field: str) -> None:
    """Fail unless `value` is a finite number within [0, 100]."""
    if not _is_number(value) or not math.isfinite(value):
        raise ValidationError(f"{field} must be a valid number", field=field)
    if value < 0 or value > 100:
        raise ValidationError(f"{field} must be between 0 and 100", field=field)


def require_flag(value: Any, field: str) -> None:
    """Fail unless `value` is a real `bool`."""
    if not isinstance(value, bool):
        raise ValidationError(f"{field} must be true or false", field=field)
