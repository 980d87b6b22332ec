from __future__ import annotations

from typing import Optional


def normalize_grade(value: Optional[str]) -> str:
    """Lowercase and drop the first period so "1st." and "1ST" compare equal."""
    if not value:
        return ""
    return str(value).strip().lower().replace(".", "", 1)


def grade_match(a: Optional[str], b: Optional[str]) -> bool:
    left = normalize_grade(a)
    return bool(left) and left == normalize_grade(b)


def center_match(a: Optional[str], b: Optional[str]) -> bool:
    """Case-insensitive exact equality; a missing side never matches."""
    if not a or not b:
        return False
    return str(a).lower() == str(b).lower()
