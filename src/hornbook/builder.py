"""TemplateBuilder: the sink every producer renders into.

A TemplateBuilder wraps a single ``write(str)`` callable, usually
``StringBuilder.append`` or a text stream's ``write``, and offers two
ways to reach it: an escaping write for text and a raw write for markup.

Example:
    >>> sb = StringBuilder()
    >>> tmpl = TemplateBuilder(sb.append)
    >>> tmpl.write_raw("<p>")
    >>> tmpl.write_str("1 < 2")
    >>> tmpl.write_raw("</p>")
    >>> sb.build()
    '<p>1 &lt; 2</p>'

Thread Safety:
    A builder is owned by the call chain that is rendering into it.
    It must not be shared between threads.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from hornbook.config import RenderConfig, get_render_config
from hornbook.errors import TemplateError
from hornbook.utils.logger import get_logger
from hornbook.utils.text import escape_html

logger = get_logger(__name__)


@runtime_checkable
class Sink(Protocol):
    """Protocol for render destinations.

    Producers depend on nothing else from the sink.
    """

    def write_str(self, text: str) -> None:
        """Append text with HTML special characters escaped."""
        ...

    def write_raw(self, text: str) -> None:
        """Append text unchanged."""
        ...


class TemplateBuilder:
    """Append-only sink with escaping and raw writes.

    Exceptions raised by ``write`` propagate to the caller unchanged.
    Producers that want to report a problem without aborting output call
    ``record_error()``; ``finish()`` raises the recorded errors as one
    ``TemplateError``.
    """

    __slots__ = ("_write", "_config", "_errors", "_reserved")

    def __init__(
        self,
        write: Callable[[str], Any],
        *,
        config: RenderConfig | None = None,
    ) -> None:
        """Initialize builder.

        Args:
            write: Callable receiving each output chunk
            config: Render configuration (defaults to the active context config)
        """
        self._write = write
        self._config = config or get_render_config()
        self._errors: list[BaseException | str] = []
        self._reserved = 0

    @property
    def config(self) -> RenderConfig:
        return self._config

    @property
    def errors(self) -> list[BaseException | str]:
        """Errors recorded so far (copy)."""
        return list(self._errors)

    @property
    def reserved(self) -> int:
        """Clamped capacity reservation, if any."""
        return self._reserved

    def write_str(self, text: str) -> None:
        """Escaping write."""
        if text:
            self._write(escape_html(text, single_quotes=self._config.escape_single_quotes))

    def write_raw(self, text: str) -> None:
        """Raw write."""
        if text:
            self._write(text)

    def write_fmt(self, fmt: str, /, *args: Any, **kwargs: Any) -> None:
        """Format with ``str.format`` and perform an escaping write."""
        self.write_str(fmt.format(*args, **kwargs))

    def reserve(self, hint: int) -> int:
        """Record a size hint as capacity reservation.

        The hint is clamped by ``RenderConfig.max_size_hint``. Output is
        never affected.

        Returns:
            The clamped reservation
        """
        self._reserved = max(self._reserved, self._config.clamp_size_hint(hint))
        return self._reserved

    def record_error(self, error: BaseException | str) -> None:
        """Record an error without interrupting output."""
        logger.warning("Render error recorded: %s", error)
        self._errors.append(error)

    def finish(self) -> None:
        """Raise TemplateError if any errors were recorded."""
        if self._errors:
            raise TemplateError(self._errors)

    def __lshift__(self, producer: object) -> TemplateBuilder:
        """Render ``producer`` once into this builder.

        Allows chaining: ``tmpl << Raw("<p>") << name << Raw("</p>")``.
        """
        from hornbook.render import render_once

        render_once(producer, self)
        return self
