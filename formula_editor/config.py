from __future__ import annotations

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

LOCALE_ENV_VAR = "FORMULA_EDITOR_LOCALE"
DEFAULT_LOCALE = "zh"
SUPPORTED_LOCALES = ("zh", "en")


def resolve_locale(locale: Optional[str] = None) -> str:
    """Pick the locale for user-facing strings.

    An explicit argument wins, then the FORMULA_EDITOR_LOCALE environment
    variable, then DEFAULT_LOCALE.
    """
    candidate = locale if locale else os.environ.get(LOCALE_ENV_VAR, "")
    candidate = (candidate or "").strip().lower()
    if not candidate:
        return DEFAULT_LOCALE
    if candidate not in SUPPORTED_LOCALES:
        logger.warning("Unsupported locale %r, falling back to %r", candidate, DEFAULT_LOCALE)
        return DEFAULT_LOCALE
    return candidate
