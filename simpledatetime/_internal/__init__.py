"""Internal utilities for simpledatetime.

This module contains private implementation details:
    - Range validation decorator and calendar checks
    - Constants and canonical anchors
    - Custom decorators (@structural_violation, @memoize)

Note: This module is not part of the public API.
"""

from __future__ import annotations

from simpledatetime._internal.decorators import memoize, structural_violation
from simpledatetime._internal.validation import (
    validate_day,
    validate_month,
    validate_range,
    validate_year,
    validate_ymd,
)

__all__: list[str] = [
    "memoize",
    "structural_violation",
    "validate_day",
    "validate_month",
    "validate_range",
    "validate_year",
    "validate_ymd",
]
