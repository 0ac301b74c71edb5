from __future__ import annotations

import re
from typing import Any, Iterable, Mapping, Optional

from ..core.constants import EMAIL_PATTERN

_EMAIL_RE = re.compile(EMAIL_PATTERN)


def is_blank(value: Any) -> bool:
    """True for missing values and strings that are empty once trimmed."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def first_missing(payload: Mapping[str, Any], fields: Iterable[str]) -> Optional[str]:
    for name in fields:
        if is_blank(payload.get(name)):
            return name
    return None


def first_non_text(payload: Mapping[str, Any], fields: Iterable[str]) -> Optional[str]:
    for name in fields:
        if not isinstance(payload.get(name), str):
            return name
    return None


def is_valid_email(value: str) -> bool:
    return bool(_EMAIL_RE.match(value.strip()))


def first_too_long(payload: Mapping[str, Any], limits: Mapping[str, int]) -> Optional[str]:
    """First field whose trimmed value exceeds its limit. Assumes text values."""
    for name, limit in limits.items():
        if len(payload[name].strip()) > limit:
            return name
    return None
