from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from .accessors import (
    get_field,
    has_field,
    optional_non_negative_int,
    optional_trimmed_string,
    parse_json_text,
)
from .errors import WrongKindError, WrongShapeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormulaEntry:
    id: str
    index: int
    latex: str
    note: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'id': self.id, 'index': self.index, 'latex': self.latex}
        if self.note is not None:
            data['note'] = self.note
        return data


def normalize_formula_entry(item: Any, idx: int) -> Optional[FormulaEntry]:
    """Build one entry from a raw array element, or None when it has no latex."""
    latex = optional_trimmed_string(get_field(item, 'latex'))
    if latex is None:
        return None

    entry_id = optional_trimmed_string(get_field(item, 'id')) or f"formula-{idx + 1}"
    index = optional_non_negative_int(get_field(item, 'index'))
    if index is None:
        index = idx + 1
    note = optional_trimmed_string(get_field(item, 'note'))
    return FormulaEntry(id=entry_id, index=index, latex=latex, note=note)


def normalize_formula_value(value: Any, locale: Optional[str] = None) -> List[FormulaEntry]:
    """Normalize an already-parsed JSON value into formula entries.

    Elements without usable latex are skipped. Kept entries retain their own
    `index` and appear in source order.
    """
    if not isinstance(value, list):
        if has_field(value, 'categories'):
            raise WrongKindError(locale)
        raise WrongShapeError(locale)

    entries: List[FormulaEntry] = []
    for idx, item in enumerate(value):
        entry = normalize_formula_entry(item, idx)
        if entry is None:
            logger.debug("Skipping formula element %d: no latex", idx)
            continue
        entries.append(entry)
    return entries


def normalize_formulas(content: str, locale: Optional[str] = None) -> List[FormulaEntry]:
    return normalize_formula_value(parse_json_text(content, locale), locale)


def formulas_to_json(entries: Iterable[FormulaEntry]) -> str:
    """Serialize entries in the shape normalize_formulas reads back unchanged."""
    return json.dumps([entry.to_dict() for entry in entries], indent=2, ensure_ascii=False)
