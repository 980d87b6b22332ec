from __future__ import annotations

import re
from typing import Optional, Union

from ..core.constants import ALL_WEEKS_ALIASES
from ..core.exceptions import ValidationError

_WEEK_RE = re.compile(r"^(?:week\s*)?0*(\d+)$", re.IGNORECASE)


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def is_all_weeks(token: Union[str, int, None]) -> bool:
    return isinstance(token, str) and token.strip().lower() in ALL_WEEKS_ALIASES


def parse_week_number(token: Union[str, int, None]) -> Optional[int]:
    """Turn a week token ("3", "week 03", 3) into a 1-based number.

    Returns None for an unset token or the aggregate token ("n/a").
    """

    if token is None or isinstance(token, bool):
        return None
    if isinstance(token, int):
        if token < 1:
            raise ValidationError(f"Week number must be >= 1, got {token}")
        return token

    text = str(token).strip()
    if not text or is_all_weeks(text):
        return None

    m = _WEEK_RE.match(text)
    if not m:
        raise ValidationError(f"Invalid week: {token!r}")
    number = int(m.group(1))
    if number < 1:
        raise ValidationError(f"Week number must be >= 1, got {number}")
    return number


def parse_page(value: Optional[str], field_name: str) -> int:
    if value is None or str(value).strip() == "":
        return 1
    text = str(value).strip()
    if not text.isdecimal() or int(text) < 1:
        raise ValidationError(f"{field_name} must be a positive integer")
    return int(text)


def parse_enum(enum_cls, value: Optional[str], field_name: str):
    try:
        return enum_cls(str(value or "").strip().lower())
    except ValueError:
        allowed = ", ".join(e.value for e in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}") from None
