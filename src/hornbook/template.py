"""Finalization: turn a fully rendered producer into output.

Every entry point renders its producer exactly once through
``render_once()``. Pass ``ByRef(p)`` to finalize a repeatable producer
without consuming it.

Example:
    >>> into_string(Raw("<b>"))
    '<b>'
    >>> into_string("<b>")
    '&lt;b&gt;'
"""

from __future__ import annotations

from typing import Any, Protocol

from hornbook.builder import TemplateBuilder
from hornbook.config import RenderConfig
from hornbook.render import as_producer, size_hint_of
from hornbook.stringbuilder import StringBuilder
from hornbook.utils.logger import get_logger

logger = get_logger(__name__)


class TextStream(Protocol):
    """Anything with a text ``write()`` method (files, ``io.StringIO``, ...)."""

    def write(self, s: str, /) -> Any: ...


def write_to_string(
    producer: object,
    sb: StringBuilder,
    *,
    config: RenderConfig | None = None,
) -> StringBuilder:
    """Render ``producer`` once, appending into ``sb``.

    Returns:
        ``sb`` for method chaining

    Raises:
        TemplateError: If the producer recorded errors while rendering
    """
    item = as_producer(producer)
    tmpl = TemplateBuilder(sb.append, config=config)
    sb.reserve(tmpl.reserve(size_hint_of(item)))
    item.render_once(tmpl)
    tmpl.finish()
    return sb


def into_string(producer: object, *, config: RenderConfig | None = None) -> str:
    """Render ``producer`` once and return the output.

    Raises:
        TemplateError: If the producer recorded errors while rendering
    """
    sb = write_to_string(producer, StringBuilder(), config=config)
    html = sb.build()
    logger.debug("Rendered %d chars (size hint %d)", len(html), sb.reserved)
    return html


def write_to_io(
    producer: object,
    stream: TextStream,
    *,
    config: RenderConfig | None = None,
) -> None:
    """Render ``producer`` once, writing each chunk straight to ``stream``.

    Nothing is buffered. Exceptions raised by ``stream.write`` propagate
    unchanged and stop rendering.

    Raises:
        TemplateError: If the producer recorded errors while rendering
    """
    item = as_producer(producer)
    tmpl = TemplateBuilder(stream.write, config=config)
    item.render_once(tmpl)
    tmpl.finish()


class Template:
    """Finalization methods shared by the built-in producers."""

    __slots__ = ()

    def into_string(self, *, config: RenderConfig | None = None) -> str:
        """Render once and return the output. See ``into_string()``."""
        return into_string(self, config=config)

    def write_to_string(
        self, sb: StringBuilder, *, config: RenderConfig | None = None
    ) -> StringBuilder:
        """Render once into ``sb``. See ``write_to_string()``."""
        return write_to_string(self, sb, config=config)

    def write_to_io(self, stream: TextStream, *, config: RenderConfig | None = None) -> None:
        """Render once straight into ``stream``. See ``write_to_io()``."""
        write_to_io(self, stream, config=config)


__all__ = [
    "Template",
    "TextStream",
    "into_string",
    "write_to_io",
    "write_to_string",
]
