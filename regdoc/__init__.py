"""Top level package for the register documentation library.

This package renders hardware registers described as an ordered list of
bit fields into two tables: a 32-column bit layout diagram and a field
reference table with bit ranges, access modes and descriptions.

Key concepts:

* **Model classes** describe fields and registers.  See :mod:`regdoc.model`.
* **Layout and field renderers** turn a field list into immutable
  output trees.  See :mod:`regdoc.layout`, :mod:`regdoc.fields` and
  :mod:`regdoc.tree`.
* **Validation** rejects inconsistent field geometry before anything is
  drawn.  See :mod:`regdoc.validation`.
* **View** owns the ``layout`` and ``fields`` output regions and loads
  registers all or nothing.  See :mod:`regdoc.view`.
* **Loaders** read register definitions from files.  See
  :mod:`regdoc.loader`.
* **Document renderers** serialize the tables (HTML, Markdown, CSV).
  See :mod:`regdoc.renderers`.
"""

from .model import Field, RegisterDefinition, REGISTER_WIDTH
from .errors import (
    RegdocError,
    FieldIssue,
    RegisterValidationError,
    DefinitionLoadError,
    UnknownRegisterError,
)
from .formatting import bit_range_label, default_value_text, normalize_line_breaks, should_rotate_label
from .tree import Cell, Row, Table, OutputRegion
from .layout import LayoutRenderer
from .fields import FieldTableRenderer
from .validation import find_issues, validate_fields
from .view import RegisterView
from .registry import Registry
from .loader import RegisterCatalog, JsonDefinitionLoader, load_catalog, loader_registry
from .renderers import DocumentRenderer, HtmlRenderer, MarkdownRenderer, CsvRenderer, renderer_registry

__all__ = [
    "Field",
    "RegisterDefinition",
    "REGISTER_WIDTH",
    "RegdocError",
    "FieldIssue",
    "RegisterValidationError",
    "DefinitionLoadError",
    "UnknownRegisterError",
    "bit_range_label",
    "default_value_text",
    "normalize_line_breaks",
    "should_rotate_label",
    "Cell",
    "Row",
    "Table",
    "OutputRegion",
    "LayoutRenderer",
    "FieldTableRenderer",
    "find_issues",
    "validate_fields",
    "RegisterView",
    "Registry",
    "RegisterCatalog",
    "JsonDefinitionLoader",
    "load_catalog",
    "loader_registry",
    "DocumentRenderer",
    "HtmlRenderer",
    "MarkdownRenderer",
    "CsvRenderer",
    "renderer_registry",
]
