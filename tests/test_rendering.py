"""Tests for formula_editor.rendering."""

from __future__ import annotations

import pytest

from formula_editor.formulas import FormulaEntry
from formula_editor.rendering import format_latex, format_markdown, format_text
from formula_editor.templates import TemplateItem


class TestEmptyInput:

    @pytest.mark.parametrize("render", [format_latex, format_markdown, format_text])
    def test_empty_sequence_renders_empty_string(self, render):
        assert render([]) == ""


class TestFormatLatex:

    def test_single_record_with_note(self):
        doc = format_latex([{"latex": "x=1", "note": "Note_1"}])
        assert doc == (
            "\\documentclass{article}\n"
            "\\usepackage{amsmath}\n"
            "\\usepackage{ctex}\n"
            "\\begin{document}\n"
            "\\noindent\\textbf{Note\\_1}\\\\\n"
            "\\begin{equation}\\label{eq:1}\n"
            "x=1\n"
            "\\end{equation}\n"
            "\\end{document}\n"
        )

    def test_latex_body_is_not_escaped(self):
        doc = format_latex([{"latex": "\\frac{a_1}{b^2} \\% 50"}])
        assert "\n\\frac{a_1}{b^2} \\% 50\n" in doc

    def test_labels_follow_position_not_index(self):
        entries = [
            FormulaEntry(id="a", index=9, latex="a"),
            FormulaEntry(id="b", index=3, latex="b"),
        ]
        doc = format_latex(entries)
        assert doc.index("\\label{eq:1}\na\n") < doc.index("\\label{eq:2}\nb\n")
        assert "eq:9" not in doc

    def test_blocks_separated_by_blank_line(self):
        doc = format_latex([{"latex": "a"}, {"latex": "b"}])
        assert "\\end{equation}\n\n\\begin{equation}\\label{eq:2}" in doc

    def test_blank_note_is_skipped(self):
        doc = format_latex([{"latex": "a", "note": "   "}])
        assert "\\textbf" not in doc

    def test_note_is_trimmed_before_escaping(self):
        doc = format_latex([{"latex": "a", "note": "  50% off  "}])
        assert "\\textbf{50\\% off}" in doc


class TestFormatMarkdown:

    def test_two_records_english(self):
        doc = format_markdown([{"latex": "a+b"}, {"latex": "c+d", "note": "two"}], locale="en")
        assert doc == (
            "### Formula 1\n\n$$\n\na+b\n\n$$"
            "\n\n"
            "### Formula 2\n\n**two**\n\n$$\n\nc+d\n\n$$"
        )

    def test_default_locale_heading(self):
        assert format_markdown([{"latex": "x"}]).startswith("### 公式 1\n")

    def test_note_is_not_escaped(self):
        doc = format_markdown([{"latex": "x", "note": " a_b "}])
        assert "**a_b**" in doc

    def test_accepts_template_items(self):
        doc = format_markdown([TemplateItem(id="t", name="T", latex="y")], locale="en")
        assert "### Formula 1" in doc
        assert "\ny\n" in doc


class TestFormatText:

    def test_segments_and_separator(self):
        doc = format_text([{"latex": "a", "note": "first"}, {"latex": "b"}], locale="en")
        assert doc == (
            "[Formula 1]\nNote: first\nLaTeX: a"
            "\n\n" + "-" * 40 + "\n\n"
            "[Formula 2]\nLaTeX: b"
        )

    def test_default_locale_labels(self):
        assert format_text([{"latex": "a", "note": "说明文字"}]) == "[公式 1]\n说明: 说明文字\nLaTeX: a"
