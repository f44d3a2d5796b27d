from __future__ import annotations

from typing import Dict, Optional

from .config import resolve_locale

MESSAGES: Dict[str, Dict[str, str]] = {
    "zh": {
        "invalid_json": "文件内容不是有效的 JSON 格式",
        "wrong_kind": "这是模板库文件，请使用“绑定模板”功能导入",
        "wrong_shape": "文件格式错误：公式集必须是 JSON 数组",
        "category_name": "分类 {n}",
        "template_name": "模板 {n}",
        "formula_heading": "公式 {n}",
        "note_label": "说明",
        "no_file": "未选择文件",
        "read_failed": "Failed to read file: {error}",
        "write_failed": "Failed to write file: {error}",
        "formulas_loaded": "已导入 {count} 条公式",
        "formulas_empty": "JSON 中没有可用的公式条目",
        "templates_loaded": "已导入 {categories} 个分类，{templates} 个模板",
        "nothing_to_export": "暂无可导出的内容",
        "library_empty": "模板库为空，暂无法导出",
        "export_done": "已导出 {kind}：{path}",
    },
    "en": {
        "invalid_json": "File content is not valid JSON",
        "wrong_kind": "This is a template library file, import it with \"Bind templates\"",
        "wrong_shape": "Invalid file format: a formula collection must be a JSON array",
        "category_name": "Category {n}",
        "template_name": "Template {n}",
        "formula_heading": "Formula {n}",
        "note_label": "Note",
        "no_file": "No file selected.",
        "read_failed": "Failed to read file: {error}",
        "write_failed": "Failed to write file: {error}",
        "formulas_loaded": "Imported {count} formulas.",
        "formulas_empty": "The JSON contains no usable formula entries.",
        "templates_loaded": "Imported {categories} categories, {templates} templates.",
        "nothing_to_export": "Nothing to export.",
        "library_empty": "The template library is empty, nothing to export.",
        "export_done": "Exported {kind}: {path}",
    },
}


def message(key: str, locale: Optional[str] = None, **fmt) -> str:
    text = MESSAGES[resolve_locale(locale)][key]
    return text.format(**fmt) if fmt else text
