"""Normalization helpers for free-text recipe fields."""

from typing import Any, List, Optional

DEFAULT_CATEGORY = "Uncategorized"


def split_lines(value: Any) -> List[str]:
    """Split multi-line input into trimmed, non-blank lines, keeping order.

    A list (or tuple) is passed through unchanged; ``None`` and ``""`` give ``[]``.
    """
    if isinstance(value, (list, tuple)):
        return list(value)
    if not value:
        return []
    return [line.strip() for line in str(value).split("\n") if line.strip()]


def normalize_category(value: Optional[str]) -> str:
    category = (value or "").strip()
    return category or DEFAULT_CATEGORY
