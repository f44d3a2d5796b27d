from __future__ import annotations

import logging
from typing import Optional

import gradio as gr

from .io_utils import output_path, read_json_text, write_text_file
from .messages import message
from .templates import library_to_json, normalize_template_value, normalize_templates

logger = logging.getLogger(__name__)


def category_choices(library):
    return [(cat.name, cat.id) for cat in library.categories]


def load_template_file(file_obj, locale: Optional[str] = None):
    """Read and normalize an uploaded template library.

    Returns (state, category dropdown update, status).
    """
    if file_obj is None:
        return None, gr.update(choices=[], value=None), message('no_file', locale)

    try:
        content = read_json_text(file_obj)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Reading template file failed: %s", exc)
        return None, gr.update(choices=[], value=None), message('read_failed', locale, error=exc)

    try:
        library = normalize_templates(content, locale)
    except ValueError as exc:
        return None, gr.update(choices=[], value=None), str(exc)

    template_count = sum(len(cat.templates) for cat in library.categories)
    logger.info("Loaded %d categories with %d templates", len(library.categories), template_count)
    dropdown = gr.update(choices=category_choices(library), value=library.selected_category_id or None)
    status = message('templates_loaded', locale, categories=len(library.categories), templates=template_count)
    return library.to_dict(), dropdown, status


def preview_category_handler(library_state, category_id):
    if not library_state or not category_id:
        return None
    library = normalize_template_value(library_state)
    category = library.find_category(category_id)
    if category is None:
        return None
    rows = [tpl.to_dict() for tpl in category.templates]
    return rows if rows else None


def export_template_library_handler(library_state, file_name, locale: Optional[str] = None):
    library = normalize_template_value(library_state) if library_state else None
    if library is None or not library.categories:
        return None, message('library_empty', locale)

    path = output_path(file_name, "template-library", ".json")
    try:
        write_text_file(path, library_to_json(library))
    except OSError as exc:
        logger.warning("Writing %s failed: %s", path, exc)
        return None, message('write_failed', locale, error=exc)

    logger.info("Exported %d categories to %s", len(library.categories), path)
    return path, message('export_done', locale, kind="JSON", path=path)
