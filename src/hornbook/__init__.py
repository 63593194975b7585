"""
Hornbook — producers and sinks for incremental HTML generation.

String literals, raw markup, closures and boxed producers all render into
one append-only sink. Each producer states how it may be rendered: once
(``RenderOnce``), repeatedly with exclusive access (``RenderMut``), or
repeatedly with shared access (``Render``).

Quick Start:
    >>> from hornbook import Raw, Multiplicity, into_string, new_renderer
    >>> page = new_renderer(
    ...     32,
    ...     lambda t: t << Raw("<p>") << "Fish & Chips" << Raw("</p>"),
    ... )
    >>> into_string(page)
    '<p>Fish &amp; Chips</p>'

Reusing a fragment:
    >>> from hornbook import ByRef
    >>> item = new_renderer(5, lambda t: t.write_str("abcde"), Multiplicity.PURE)
    >>> into_string(new_renderer(10, lambda t: t << ByRef(item) << ByRef(item)))
    'abcdeabcde'

Installation:
    pip install hornbook              # zero runtime dependencies
"""

from hornbook.boxed import BoxMut, BoxOnce, BoxRef, boxed
from hornbook.builder import Sink, TemplateBuilder
from hornbook.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from hornbook.errors import ConsumedError, HornbookError, TemplateError
from hornbook.leaves import Raw, Text
from hornbook.render import (
    ByMut,
    ByRef,
    Render,
    RenderMut,
    RenderOnce,
    as_producer,
    render_once,
)
from hornbook.renderer import (
    Multiplicity,
    MutRenderer,
    PureRenderer,
    Renderer,
    new_boxed_renderer,
    new_renderer,
    producer,
)
from hornbook.stringbuilder import StringBuilder
from hornbook.template import Template, into_string, write_to_io, write_to_string

__version__ = "0.1.0"

__all__ = [
    # Capabilities
    "Render",
    "RenderMut",
    "RenderOnce",
    # Forwarding adapters
    "ByMut",
    "ByRef",
    # Erasure handles
    "BoxMut",
    "BoxOnce",
    "BoxRef",
    "boxed",
    # Closure-based producers
    "Multiplicity",
    "MutRenderer",
    "PureRenderer",
    "Renderer",
    "new_boxed_renderer",
    "new_renderer",
    "producer",
    # Leaves
    "Raw",
    "Text",
    # Sink and finalization
    "Sink",
    "StringBuilder",
    "Template",
    "TemplateBuilder",
    "as_producer",
    "into_string",
    "render_once",
    "write_to_io",
    "write_to_string",
    # Configuration
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
    # Errors
    "ConsumedError",
    "HornbookError",
    "TemplateError",
    "__version__",
]
