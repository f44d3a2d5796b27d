from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .accessors import get_field, has_field, optional_trimmed_string, parse_json_text
from .messages import message

logger = logging.getLogger(__name__)

# Root categories sit at depth 1; anything below this depth is dropped.
MAX_CATEGORY_DEPTH = 6


@dataclass(frozen=True)
class TemplateItem:
    id: str
    name: str
    latex: str
    note: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'id': self.id, 'name': self.name, 'latex': self.latex}
        if self.note is not None:
            data['note'] = self.note
        return data


@dataclass(frozen=True)
class TemplateCategory:
    id: str
    name: str
    templates: Tuple[TemplateItem, ...] = ()
    parent_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'id': self.id,
            'name': self.name,
            'templates': [tpl.to_dict() for tpl in self.templates],
        }
        if self.parent_id is not None:
            data['parentId'] = self.parent_id
        return data


@dataclass(frozen=True)
class TemplateLibrary:
    categories: Tuple[TemplateCategory, ...] = ()
    selected_category_id: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'categories': [cat.to_dict() for cat in self.categories],
            'selectedCategoryId': self.selected_category_id,
        }

    def find_category(self, category_id: str) -> Optional[TemplateCategory]:
        for category in self.categories:
            if category.id == category_id:
                return category
        return None


def normalize_template_items(value: Any, category_id: str, locale: Optional[str] = None) -> List[TemplateItem]:
    """Normalize a category's `templates` array; non-arrays count as empty."""
    if not isinstance(value, list):
        return []

    items: List[TemplateItem] = []
    for tidx, tpl in enumerate(value):
        latex = optional_trimmed_string(get_field(tpl, 'latex'))
        if latex is None:
            logger.debug("Skipping template %d of category %r: no latex", tidx, category_id)
            continue
        name = optional_trimmed_string(get_field(tpl, 'name')) or message('template_name', locale, n=tidx + 1)
        tpl_id = optional_trimmed_string(get_field(tpl, 'id')) or f"template-{category_id}-{tidx + 1}"
        note = optional_trimmed_string(get_field(tpl, 'note'))
        items.append(TemplateItem(id=tpl_id, name=name, latex=latex, note=note))
    return items


def child_categories(category: Any) -> Any:
    """Children live under `categories`; `children` is read only when that key is absent."""
    if has_field(category, 'categories'):
        return get_field(category, 'categories')
    return get_field(category, 'children')


def walk_categories(
    value: Any,
    parent_id: Optional[str] = None,
    depth: int = 1,
    locale: Optional[str] = None,
) -> List[TemplateCategory]:
    """Flatten a category tree in pre-order, returning a fresh list.

    Synthesized ids combine depth and sibling position, so two branches that
    both rely on synthesized ids can produce the same id at the same depth.
    """
    if depth > MAX_CATEGORY_DEPTH:
        if isinstance(value, list) and value:
            logger.debug("Dropping %d categories below depth %d", len(value), MAX_CATEGORY_DEPTH)
        return []
    if not isinstance(value, list):
        return []

    flat: List[TemplateCategory] = []
    for idx, cat in enumerate(value):
        name = optional_trimmed_string(get_field(cat, 'name')) or message('category_name', locale, n=idx + 1)
        cat_id = optional_trimmed_string(get_field(cat, 'id')) or f"category-{depth}-{idx + 1}"
        templates = normalize_template_items(get_field(cat, 'templates'), cat_id, locale)
        own_parent = optional_trimmed_string(get_field(cat, 'parentId'))

        flat.append(TemplateCategory(
            id=cat_id,
            name=name,
            templates=tuple(templates),
            parent_id=own_parent or parent_id,
        ))
        flat.extend(walk_categories(child_categories(cat), cat_id, depth + 1, locale))
    return flat


def normalize_template_value(value: Any, locale: Optional[str] = None) -> TemplateLibrary:
    """Normalize a bare category array or a `{categories: [...]}` wrapper."""
    root = get_field(value, 'categories') if has_field(value, 'categories') else value
    categories = walk_categories(root, None, 1, locale)
    selected = categories[0].id if categories else ''
    return TemplateLibrary(categories=tuple(categories), selected_category_id=selected)


def normalize_templates(content: str, locale: Optional[str] = None) -> TemplateLibrary:
    return normalize_template_value(parse_json_text(content, locale), locale)


def library_to_json(library: TemplateLibrary) -> str:
    """Serialize the flattened categories as a `{categories: [...]}` document."""
    payload = {'categories': [cat.to_dict() for cat in library.categories]}
    return json.dumps(payload, indent=2, ensure_ascii=False)
