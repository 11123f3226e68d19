"""Value conversion utilities.

Examples:
    >>> from simpledatetime import TimeImmutable
    >>> from simpledatetime.convert import to_json, from_json

    >>> t = TimeImmutable("14:30")
    >>> from_json(to_json(t)) == t
    True
"""

from __future__ import annotations

from simpledatetime.convert.json import from_json, to_json

__all__ = [
    "to_json",
    "from_json",
]
