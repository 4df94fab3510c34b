from __future__ import annotations

import math
from typing import Any, Optional

from ..core.exceptions import ValidationError


def parse_number(value: Any) -> float:
    """Lenient number parser used by forms and by aggregation.

    Accepts a decimal comma ("7,5"). Anything missing or unparseable becomes 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(str(value).replace(",", ".").strip())
        except ValueError:
            return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def parse_optional_number(value: Any) -> Optional[float]:
    """Like ``parse_number`` but keeps "absent" distinct from zero."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(str(value).replace(",", ".").strip())
        except ValueError:
            return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def require_positive(value: Any, field_name: str) -> float:
    number = parse_number(value)
    if number <= 0:
        raise ValidationError(f"{field_name} must be a positive number")
    return number


def require_optional_positive(value: Any, field_name: str) -> Optional[float]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return require_positive(value, field_name)


def clean_text(value: Optional[str]) -> str:
    return (value or "").strip()
