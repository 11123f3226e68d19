"""Modifier phrase validation.

Relative-adjustment phrases ("+1 day", "next monday", "+30 minutes") are
forwarded to the engine only if they do not mention the other dimension.
The phrase is lowercased and searched for whole-word occurrences of the
blocked keywords, so "monday" blocks "next monday" but a word that merely
contains a keyword is left alone ("day" does not match "mayday" or
"someday").

The keyword list is a heuristic filter, not a grammar check: the engine
accepts phrases the list does not anticipate.
"""

from __future__ import annotations

import re

import structlog

from simpledatetime._internal.decorators import memoize
from simpledatetime.dimension import Dimension
from simpledatetime.errors import StructuralViolation

log = structlog.get_logger(__name__)


@memoize
def keyword_pattern(dimension: Dimension) -> re.Pattern[str]:
    """Return the compiled whole-word pattern of a dimension's blocked keywords."""
    keywords = sorted(dimension.descriptor.blocked_keywords, key=len, reverse=True)
    alternation = "|".join(re.escape(keyword) for keyword in keywords)
    # Letters only count as word characters, so "+1days" is still caught
    return re.compile(rf"(?<![a-z])(?:{alternation})(?![a-z])")


def find_blocked_keyword(modifier: str, dimension: Dimension) -> str | None:
    """Return the first blocked keyword found in modifier, or None.

    Examples:
        >>> find_blocked_keyword("next Monday", Dimension.TIME)
        'monday'
        >>> find_blocked_keyword("+2 hours", Dimension.TIME) is None
        True
    """
    match = keyword_pattern(dimension).search(modifier.lower())
    return match.group(0) if match else None


def validate_modifier(modifier: str, dimension: Dimension) -> None:
    """Reject a modifier phrase that would touch a foreign dimension.

    Args:
        modifier: Relative-adjustment phrase.
        dimension: The dimension of the value being modified.

    Raises:
        StructuralViolation: If the phrase contains a blocked keyword.
    """
    keyword = find_blocked_keyword(modifier, dimension)
    if keyword is None:
        return

    descriptor = dimension.descriptor
    log.debug(
        "modifier_rejected",
        modifier=modifier,
        keyword=keyword,
        dimension=dimension.value,
    )
    raise StructuralViolation(
        f"modifier {modifier!r} affects {descriptor.foreign} components, which is "
        f"not allowed for {descriptor.label}; {descriptor.label} values only "
        f"support {dimension.value} modifications (e.g. {descriptor.modifier_examples})"
    )


__all__ = ["validate_modifier", "find_blocked_keyword", "keyword_pattern"]
