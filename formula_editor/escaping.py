from __future__ import annotations

LATEX_SPECIAL_CHARS = frozenset('\\#%&_$^{}')


def escape_latex_text(text: str) -> str:
    """Prefix every LaTeX metacharacter in plain text with a backslash.

    Escaping is per character: existing backslash sequences are not recognized,
    so escaping twice doubles the backslashes.
    """
    return ''.join('\\' + ch if ch in LATEX_SPECIAL_CHARS else ch for ch in text)
