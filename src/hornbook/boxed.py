"""Erasure handles for runtime-polymorphic producers.

A handle owns a producer and exposes exactly one capability tier, so
producers chosen at runtime can be stored side by side and rendered
through a uniform interface. Handles add no buffering and no
transformation: every call forwards to the wrapped producer.

- ``BoxOnce``: ``RenderOnce`` only.
- ``BoxMut``: ``RenderOnce`` + ``RenderMut``, forwarding to ``render_mut()``.
- ``BoxRef``: all three tiers, forwarding to ``render()``.

A handle releases its producer after its consuming ``render_once()``;
any later render raises ``ConsumedError``.

Example:
    >>> parts = [boxed(Raw("<hr>")), boxed("a & b")]
    >>> into_string(new_renderer(0, lambda t: [t << p for p in parts]))
    '<hr>a &amp; b'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hornbook.errors import ConsumedError
from hornbook.render import RenderOnce, as_producer, size_hint_of, supports
from hornbook.template import Template

if TYPE_CHECKING:
    from hornbook.builder import TemplateBuilder


class _Handle(Template):
    """Ownership bookkeeping shared by the three handle shapes."""

    __slots__ = ("_inner",)

    def __init__(self, inner: RenderOnce) -> None:
        self._inner: RenderOnce | None = inner

    def _get(self) -> RenderOnce:
        if self._inner is None:
            raise ConsumedError(self)
        return self._inner

    def _release(self) -> RenderOnce:
        inner = self._get()
        self._inner = None
        return inner

    @property
    def spent(self) -> bool:
        """True once the handle's consuming render has run."""
        return self._inner is None

    def size_hint(self) -> int:
        return size_hint_of(self._get())

    def __repr__(self) -> str:
        inner = "<spent>" if self._inner is None else repr(self._inner)
        return f"{type(self).__name__}({inner})"


class BoxOnce(_Handle):
    """Handle over any ``RenderOnce`` producer."""

    __slots__ = ()

    def __init__(self, producer: object) -> None:
        super().__init__(as_producer(producer))

    def render_once(self, tmpl: TemplateBuilder) -> None:
        self._release().render_once(tmpl)


class BoxMut(_Handle):
    """Handle over a ``RenderMut`` producer."""

    __slots__ = ()

    def __init__(self, producer: object) -> None:
        inner = as_producer(producer)
        if not supports(inner, "render_mut"):
            msg = f"BoxMut requires a RenderMut producer, got {type(inner).__name__}"
            raise TypeError(msg)
        super().__init__(inner)

    def render_once(self, tmpl: TemplateBuilder) -> None:
        inner = self._release()
        inner.render_mut(tmpl)  # type: ignore[attr-defined]

    def render_mut(self, tmpl: TemplateBuilder) -> None:
        self._get().render_mut(tmpl)  # type: ignore[attr-defined]


class BoxRef(_Handle):
    """Handle over a ``Render`` producer."""

    __slots__ = ()

    def __init__(self, producer: object) -> None:
        inner = as_producer(producer)
        if not supports(inner, "render"):
            msg = f"BoxRef requires a Render producer, got {type(inner).__name__}"
            raise TypeError(msg)
        super().__init__(inner)

    def render_once(self, tmpl: TemplateBuilder) -> None:
        inner = self._release()
        inner.render(tmpl)  # type: ignore[attr-defined]

    def render_mut(self, tmpl: TemplateBuilder) -> None:
        self._get().render(tmpl)  # type: ignore[attr-defined]

    def render(self, tmpl: TemplateBuilder) -> None:
        self._get().render(tmpl)  # type: ignore[attr-defined]


def boxed(producer: object) -> BoxOnce | BoxMut | BoxRef:
    """Box ``producer`` behind the strongest handle shape it supports."""
    inner = as_producer(producer)
    if supports(inner, "render"):
        return BoxRef(inner)
    if supports(inner, "render_mut"):
        return BoxMut(inner)
    return BoxOnce(inner)


__all__ = ["BoxMut", "BoxOnce", "BoxRef", "boxed"]
