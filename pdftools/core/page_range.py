"""Page range parsing for the split workflow."""

import re
from typing import List, Optional, Set

# Leading ASCII digits; whatever follows them is ignored
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _to_int(text: str) -> Optional[int]:
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def parse_page_range(range_text: str, total_pages: int) -> List[int]:
    """
    Convert a human-typed page selection into zero-based page indices.

    Segments are separated by commas. ``"a-b"`` selects an inclusive range
    clamped to the document, a bare number selects one page. Segments that
    do not parse, or that fall entirely outside ``1..total_pages``, are
    skipped rather than rejected, so a fully malformed input yields ``[]``
    and the caller decides how to report it. A number is read from its
    leading ASCII digits and anything after them is ignored, so ``"3abc"``
    selects page 3 and ``"1_0"`` selects page 1.

    Args:
        range_text: Selection such as ``"1,3-5,7"``
        total_pages: Page count of the document the selection applies to

    Returns:
        Sorted list of unique zero-based indices, each in ``[0, total_pages)``

    Examples:
        >>> parse_page_range("1,3-5,7", 10)
        [0, 2, 3, 4, 6]
        >>> parse_page_range("5-2", 10)
        []
        >>> parse_page_range("1-1000", 3)
        [0, 1, 2]
    """
    pages: Set[int] = set()

    for part in (segment.strip() for segment in range_text.split(",")):
        if "-" in part:
            bounds = part.split("-")
            start, end = _to_int(bounds[0]), _to_int(bounds[1])
            if start is None or end is None:
                continue
            # An inverted range stays empty after clamping
            for page in range(max(1, start), min(total_pages, end) + 1):
                pages.add(page - 1)
        else:
            page = _to_int(part)
            if page is not None and 1 <= page <= total_pages:
                pages.add(page - 1)

    return sorted(pages)
