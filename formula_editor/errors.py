from __future__ import annotations

from typing import Optional

from .messages import message


class NormalizationError(ValueError):
    """Raised when a whole document cannot be normalized.

    Per-element problems never raise; they are dropped or defaulted.
    """

    kind = "Normalization"
    message_key = ""

    def __init__(self, locale: Optional[str] = None, detail: Optional[str] = None):
        self.detail = detail
        super().__init__(message(self.message_key, locale))


class InvalidJsonError(NormalizationError):
    kind = "InvalidJson"
    message_key = "invalid_json"


class WrongKindError(NormalizationError):
    """The document is a template library where a formula collection was expected."""

    kind = "WrongKind"
    message_key = "wrong_kind"


class WrongShapeError(NormalizationError):
    kind = "WrongShape"
    message_key = "wrong_shape"
