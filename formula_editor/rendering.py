"""Render formula collections as LaTeX, Markdown or plain-text documents.

Each renderer accepts any sequence of records exposing `latex` and an
optional `note`: normalized entries, template items or plain mappings.
Numbering follows position in the sequence, not the record's own index.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Tuple

from .escaping import escape_latex_text
from .messages import message

LATEX_PREAMBLE = (
    "\\documentclass{article}\n"
    "\\usepackage{amsmath}\n"
    "\\usepackage{ctex}\n"
    "\\begin{document}\n"
)
LATEX_POSTAMBLE = "\n\\end{document}\n"

TEXT_SEPARATOR = "\n\n" + "-" * 40 + "\n\n"


def record_fields(record: Any) -> Tuple[str, Optional[str]]:
    """Return (latex, trimmed note or None) from a record or mapping."""
    if isinstance(record, Mapping):
        latex, note = record.get('latex'), record.get('note')
    else:
        latex, note = getattr(record, 'latex', None), getattr(record, 'note', None)

    if not isinstance(note, str) or not note.strip():
        note = None
    else:
        note = note.strip()
    return ('' if latex is None else str(latex)), note


def format_latex(records: Iterable[Any]) -> str:
    blocks: List[str] = []
    for n, record in enumerate(records, start=1):
        latex, note = record_fields(record)
        note_block = f"\\noindent\\textbf{{{escape_latex_text(note)}}}\\\\\n" if note else ""
        blocks.append(
            f"{note_block}\\begin{{equation}}\\label{{eq:{n}}}\n{latex}\n\\end{{equation}}"
        )
    if not blocks:
        return ""
    return LATEX_PREAMBLE + "\n\n".join(blocks) + LATEX_POSTAMBLE


def format_markdown(records: Iterable[Any], locale: Optional[str] = None) -> str:
    segments: List[str] = []
    for n, record in enumerate(records, start=1):
        latex, note = record_fields(record)
        parts = [f"### {message('formula_heading', locale, n=n)}"]
        if note:
            parts.append(f"**{note}**")
        parts.extend(["$$", latex, "$$"])
        segments.append("\n\n".join(parts))
    return "\n\n".join(segments)


def format_text(records: Iterable[Any], locale: Optional[str] = None) -> str:
    segments: List[str] = []
    for n, record in enumerate(records, start=1):
        latex, note = record_fields(record)
        parts = [f"[{message('formula_heading', locale, n=n)}]"]
        if note:
            parts.append(f"{message('note_label', locale)}: {note}")
        parts.append(f"LaTeX: {latex}")
        segments.append("\n".join(parts))
    return TEXT_SEPARATOR.join(segments)
