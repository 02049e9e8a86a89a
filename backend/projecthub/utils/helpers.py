"""Small shared helpers for rating math, tag cleanup and search input."""

import math
from typing import Iterable, List


def average_rating(values: Iterable[float]) -> float:
    values = list(values)
    if not values:
        return 0
    return sum(values) / len(values)


def page_count(total: int, page_size: int) -> int:
    if page_size <= 0:
        return 0
    return math.ceil(total / page_size)


def normalize_tags(tags) -> List[str]:
    if not isinstance(tags, (list, tuple)):
        return []
    cleaned = []
    for tag in tags:
        text = str(tag or "").strip()
        if text:
            cleaned.append(text)
    return cleaned


def escape_like(text: str, escape_char: str = "\\") -> str:
    """Escape SQL LIKE wildcards so the search text matches literally."""
    return (
        text.replace(escape_char, escape_char * 2)
        .replace("%", f"{escape_char}%")
        .replace("_", f"{escape_char}_")
    )
