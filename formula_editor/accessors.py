from __future__ import annotations

import json
from typing import Any, Optional

from .errors import InvalidJsonError

_MISSING = object()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON value")


def parse_json_text(content: str, locale: Optional[str] = None) -> Any:
    """Parse raw JSON text, mapping decode failures to InvalidJsonError.

    NaN/Infinity literals and nesting too deep for the decoder are invalid too.
    """
    if isinstance(content, bytes):
        content = content.decode('utf-8')
    try:
        return json.loads(content, parse_constant=_reject_constant)
    except (TypeError, ValueError, RecursionError) as exc:
        raise InvalidJsonError(locale, detail=str(exc)) from exc


def has_field(item: Any, key: str) -> bool:
    """True when `item` is an object carrying `key`, even with a null value."""
    return isinstance(item, dict) and key in item


def get_field(item: Any, key: str, default: Any = None) -> Any:
    """Read a field from a JSON object; anything that is not an object has no fields."""
    if not isinstance(item, dict):
        return default
    value = item.get(key, _MISSING)
    return default if value is _MISSING else value


def optional_trimmed_string(value: Any) -> Optional[str]:
    """Return the trimmed string, or None for non-strings and blank strings."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def optional_non_negative_int(value: Any) -> Optional[int]:
    # bool is an int subclass but never a valid index
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= 0 else None
