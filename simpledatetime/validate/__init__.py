"""Dimension gates for format strings and modifier phrases.

Functions:
    validate_format: Reject format letters of a foreign dimension.
    validate_modifier: Reject modifier keywords of a foreign dimension.
"""

from __future__ import annotations

from simpledatetime.validate.format import find_blocked_char, validate_format
from simpledatetime.validate.modifier import find_blocked_keyword, validate_modifier

__all__ = [
    "find_blocked_char",
    "find_blocked_keyword",
    "validate_format",
    "validate_modifier",
]
