"""Output formats for register documentation.

This package contains the document renderers:
- html: HTML tables and a standalone page
- markdown: ASCII layout diagram and GitHub Flavoured Markdown table
- csv: one CSV block per table

All renderers are automatically registered via decorators.
"""

from .base import DocumentRenderer, renderer_registry
from .html import HtmlRenderer
from .markdown import MarkdownRenderer
from .csv import CsvRenderer

__all__ = [
    "DocumentRenderer",
    "renderer_registry",
    "HtmlRenderer",
    "MarkdownRenderer",
    "CsvRenderer",
]
