from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .formulas import FormulaEntry, formulas_to_json, normalize_formula_value, normalize_formulas
from .io_utils import output_path, read_json_text, write_text_file
from .messages import message
from .rendering import format_latex, format_markdown, format_text

logger = logging.getLogger(__name__)

EXPORT_FORMATS = {
    "LaTeX": ".tex",
    "Markdown": ".md",
    "Text": ".txt",
    "JSON": ".json",
}


def render_formulas(entries: List[FormulaEntry], output_format: str, locale: Optional[str] = None) -> str:
    if output_format == "LaTeX":
        return format_latex(entries)
    if output_format == "Markdown":
        return format_markdown(entries, locale)
    if output_format == "Text":
        return format_text(entries, locale)
    return formulas_to_json(entries)


def load_formula_file(file_obj, locale: Optional[str] = None):
    """Read and normalize an uploaded formula collection.

    Returns (state, preview, status).
    """
    if file_obj is None:
        return None, None, message('no_file', locale)

    try:
        content = read_json_text(file_obj)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Reading formula file failed: %s", exc)
        return None, None, message('read_failed', locale, error=exc)

    try:
        entries = normalize_formulas(content, locale)
    except ValueError as exc:
        return None, None, str(exc)

    rows: List[Dict[str, Any]] = [entry.to_dict() for entry in entries]
    logger.info("Loaded %d formulas", len(rows))
    if not rows:
        return rows, None, message('formulas_empty', locale)
    return rows, rows, message('formulas_loaded', locale, count=len(rows))


def export_formulas_handler(formulas, output_format, file_name, locale: Optional[str] = None):
    if not formulas:
        return None, message('nothing_to_export', locale)

    entries = normalize_formula_value(formulas, locale)
    if not entries:
        return None, message('nothing_to_export', locale)

    ext = EXPORT_FORMATS.get(output_format, ".json")
    path = output_path(file_name, "formulas", ext)
    content = render_formulas(entries, output_format, locale)

    try:
        write_text_file(path, content)
    except OSError as exc:
        logger.warning("Writing %s failed: %s", path, exc)
        return None, message('write_failed', locale, error=exc)

    logger.info("Exported %d formulas as %s to %s", len(entries), output_format, path)
    return path, message('export_done', locale, kind=output_format, path=path)
