"""Core logic for the formula editor.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- normalize formula collections and template libraries from loose JSON
- escape plain text for LaTeX
- render formula collections as LaTeX, Markdown, plain text or JSON
"""
