"""Register view: the pair of output regions and the load operation.

A :class:`RegisterView` owns the ``layout`` and ``fields`` regions.
Loading a register is all or nothing: the definition is validated and
both tables are built before either region is touched, so a failed load
leaves the previous register on display.
"""

from __future__ import annotations

import logging
from typing import Optional

from .fields import FieldTableRenderer
from .formatting import HTML_LINE_BREAK
from .layout import LayoutRenderer
from .model import REGISTER_WIDTH, RegisterDefinition
from .tree import OutputRegion
from .validation import validate_register

logger = logging.getLogger(__name__)


class RegisterView:
    """Render register definitions into a ``layout`` and a ``fields`` region.

    Args:
        validate: Check field geometry before drawing.  With ``False`` the
            view draws malformed definitions as they are.
        line_break: Marker replacing line breaks in field descriptions.
        width: Register width in bits.
    """

    def __init__(self, validate: bool = True, line_break: str = HTML_LINE_BREAK, width: int = REGISTER_WIDTH) -> None:
        self.validate = validate
        self.width = width
        self.layout = OutputRegion("layout")
        self.fields = OutputRegion("fields")
        self.layout_renderer = LayoutRenderer(width)
        self.field_renderer = FieldTableRenderer(line_break)
        self._current: Optional[RegisterDefinition] = None

    @property
    def current(self) -> Optional[RegisterDefinition]:
        """The register currently displayed, if any."""
        return self._current

    def load(self, definition: RegisterDefinition) -> None:
        """Display ``definition`` in both regions.

        Raises:
            RegisterValidationError: If validation is enabled and the field
                geometry is inconsistent.  Both regions keep their content.
        """
        if self.validate:
            validate_register(definition, self.width)

        layout = self.layout_renderer.build(definition.fields)
        fields = self.field_renderer.build(definition.fields)

        self.layout.replace(layout)
        self.fields.replace(fields)
        self._current = definition
        logger.info("loaded register %s (%d fields)", definition.name, len(definition))

    def clear(self) -> None:
        self.layout.clear()
        self.fields.clear()
        self._current = None
