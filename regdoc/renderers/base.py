"""Base document renderer class and registry.

A document renderer serializes the tables held by a
:class:`regdoc.view.RegisterView` into one output format.  Concrete
renderers register themselves in ``renderer_registry``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..formatting import HTML_LINE_BREAK
from ..model import RegisterDefinition
from ..registry import Registry
from ..tree import OutputRegion, Table
from ..view import RegisterView

# Registry for document renderer implementations
renderer_registry = Registry("renderer")


class DocumentRenderer(ABC):
    """Abstract base class for serializing register tables.

    ``line_break`` is the marker this format wants in field descriptions;
    it is handed to the :class:`RegisterView` that builds the tables.
    """

    line_break: str = HTML_LINE_BREAK

    @abstractmethod
    def render_layout(self, table: Table) -> str:
        """Serialize the bit layout table."""
        raise NotImplementedError

    @abstractmethod
    def render_fields(self, table: Table) -> str:
        """Serialize the field reference table."""
        raise NotImplementedError

    @abstractmethod
    def render_document(self, definition: RegisterDefinition, layout_output: str, fields_output: str) -> str:
        """Combine the serialized tables into a complete document."""
        raise NotImplementedError

    def make_view(self, validate: bool = True) -> RegisterView:
        """Return a view whose descriptions use this format's line breaks."""
        return RegisterView(validate=validate, line_break=self.line_break)

    def render_view(self, view: RegisterView) -> str:
        """Serialize the register currently loaded in ``view``."""
        if view.current is None:
            raise ValueError("no register loaded")
        return self.render_document(
            view.current,
            self.render_layout(_content(view.layout)),
            self.render_fields(_content(view.fields)),
        )


def _content(region: OutputRegion) -> Table:
    if region.content is None:
        raise ValueError(f"region '{region.name}' is empty")
    return region.content
