"""HTML renderer.

Renders the layout and field tables as HTML tables using the class names
the register page stylesheet expects.  Editable cells become text inputs
and long field labels are wrapped in a ``rotate`` span.  A standalone
page is produced from a Jinja2 template.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader

from ..formatting import HTML_LINE_BREAK
from ..model import RegisterDefinition
from ..tree import Cell, Row, Table
from .base import DocumentRenderer, renderer_registry

# Template directory
TEMPLATES_DIR = Path(__file__).parent / "templates"


@renderer_registry.register("html")
class HtmlRenderer(DocumentRenderer):
    """Render register tables as HTML.

    Every cell is HTML-escaped except descriptions, which already carry
    ``<br>`` markers and are emitted verbatim.
    """

    line_break = HTML_LINE_BREAK

    def __init__(self, title: Optional[str] = None):
        """Initialize renderer with Jinja2 environment."""
        self.title = title
        self._env = Environment(
            loader=FileSystemLoader(TEMPLATES_DIR),
            autoescape=False,
        )
        self._css = None

    @property
    def css(self) -> str:
        """Load and cache CSS from template file."""
        if self._css is None:
            css_path = TEMPLATES_DIR / "register_styles.css"
            self._css = css_path.read_text()
        return self._css

    def _escape_html(self, text: str) -> str:
        """Escape HTML special characters."""
        return (text
                .replace("&", "&amp;")
                .replace("<", "&lt;")
                .replace(">", "&gt;")
                .replace('"', "&quot;"))

    def _render_cell(self, cell: Cell) -> str:
        tag = "th" if cell.header else "td"
        attrs = ""
        if cell.css_class:
            attrs += f' class="{cell.css_class}"'
        if cell.colspan != 1:
            attrs += f' colspan="{cell.colspan}"'

        if cell.editable:
            body = f'<input type="text" value="{self._escape_html(cell.text)}">'
        elif cell.markup:
            body = cell.text
        elif cell.rotate:
            body = f'<span class="rotate">{self._escape_html(cell.text)}</span>'
        else:
            body = self._escape_html(cell.text)
        return f"<{tag}{attrs}>{body}</{tag}>"

    def _render_row(self, row: Row) -> str:
        cells = "".join(self._render_cell(c) for c in row)
        return f"<tr>{cells}</tr>"

    def _render_table(self, table: Table) -> str:
        parts: List[str] = [f'<table class="{table.css_class}">']
        if table.head:
            parts.append("<thead>")
            parts.extend(self._render_row(r) for r in table.head)
            parts.append("</thead>")
        parts.append("<tbody>")
        parts.extend(self._render_row(r) for r in table.body)
        parts.append("</tbody>")
        parts.append("</table>")
        return "\n".join(parts)

    def render_layout(self, table: Table) -> str:
        return self._render_table(table)

    def render_fields(self, table: Table) -> str:
        return self._render_table(table)

    def render_document(self, definition: RegisterDefinition, layout_output: str, fields_output: str) -> str:
        """Render a complete HTML page with the layout and field tables."""
        template = self._env.get_template("register_page.jinja2")
        return template.render(
            title=self._escape_html(self.title or definition.name),
            register_name=self._escape_html(definition.name),
            description=self._escape_html(definition.description or ""),
            css=self.css,
            layout_html=layout_output,
            fields_html=fields_output,
        )
