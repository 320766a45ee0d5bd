"""Parsing of human-entered page range specifiers such as ``"1-3,5,10-12"``."""

from __future__ import annotations

import re
from typing import List, Optional, Set

from .types import RangeParseResult
from .utils import get_logger

LOGGER = get_logger("pdf_slicer.ranges")

_WHITESPACE = re.compile(r"\s+")
RANGE_SEPARATOR = "-"


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text)
    except ValueError:
        return None


def _token_indices(token: str, page_count: int) -> Optional[Set[int]]:
    """Return the zero-based indices for *token*, or ``None`` if malformed."""

    if RANGE_SEPARATOR in token:
        # Empty pieces are ignored, so "-3" reads as "3-3" and "1-2-4" as "1-4".
        parts = [part for part in token.split(RANGE_SEPARATOR) if part]
        if not parts:
            return None
        first, last = _parse_int(parts[0]), _parse_int(parts[-1])
        if first is None or last is None:
            return None
        lo = max(1, min(first, last))
        hi = min(page_count, max(first, last))
        return set(range(lo - 1, hi))

    value = _parse_int(token)
    if value is None:
        return None
    if 1 <= value <= page_count:
        return {value - 1}
    return set()


def parse_range_spec(spec: str, page_count: int) -> RangeParseResult:
    """Parse *spec* into zero-based page indices bounded by *page_count*.

    Tokens are comma separated; each is a 1-based page number or an inclusive
    ``a-b`` range whose endpoints may appear in either order. Malformed tokens
    and pages outside ``[1, page_count]`` are dropped without raising; the
    dropped tokens are reported on the result.
    """

    compact = _WHITESPACE.sub("", spec or "")
    indices: Set[int] = set()
    dropped: List[str] = []

    for token in compact.split(","):
        if not token:
            continue
        token_indices = _token_indices(token, page_count)
        if not token_indices:
            dropped.append(token)
            continue
        indices |= token_indices

    if dropped:
        LOGGER.debug("Dropped range tokens %s for %d page(s)", dropped, page_count)
    return RangeParseResult(indices=frozenset(indices), dropped=tuple(dropped))


def parse_page_indices(spec: str, page_count: int) -> Set[int]:
    """Return the set of zero-based indices selected by *spec*."""

    return set(parse_range_spec(spec, page_count).indices)


def format_page_indices(indices) -> str:
    """Render zero-based *indices* as a compact 1-based range specifier."""

    pages = sorted({index + 1 for index in indices})
    if not pages:
        return ""

    parts: List[str] = []
    start = previous = pages[0]
    for page in pages[1:]:
        if page == previous + 1:
            previous = page
            continue
        parts.append(str(start) if start == previous else f"{start}-{previous}")
        start = previous = page
    parts.append(str(start) if start == previous else f"{start}-{previous}")
    return ",".join(parts)


__all__ = ["parse_range_spec", "parse_page_indices", "format_page_indices", "RANGE_SEPARATOR"]
