from __future__ import annotations

import os
import tempfile


def read_json_text(file_obj) -> str:
    """Read raw JSON text from an uploaded file or file path.

    The text is returned unparsed: the normalizers parse it themselves so that
    decode failures surface as InvalidJsonError.
    """
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8')
        return content

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def output_path(file_name: str, default_name: str, ext: str) -> str:
    """Place an export in the temp directory, appending `ext` when missing."""
    file_name = (file_name or '').strip() or default_name
    if not file_name.lower().endswith(ext):
        file_name += ext
    return os.path.join(tempfile.gettempdir(), file_name)


def write_text_file(path: str, content: str) -> str:
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)
    return path
