"""Rendering capability protocols and forwarding adapters.

Three nested capabilities describe how a producer may be rendered:

- ``RenderOnce``: render exactly once, consuming the producer.
- ``RenderMut``: render any number of times through exclusive access.
- ``Render``: render any number of times through shared access, without
  side effects on the producer.

Each is a strict superset of the previous one, so a ``Render`` producer is
always usable where a ``RenderOnce`` is expected. ``ByRef`` and ``ByMut``
derive the weakest capability from a stronger one: each wraps a repeatable
producer and spends exactly one ``render()``/``render_mut()`` call when it
is consumed, leaving the wrapped producer untouched.

Example:
    >>> sub = new_renderer(5, lambda t: t.write_str("abcde"), Multiplicity.PURE)
    >>> page = new_renderer(10, lambda t: t << ByRef(sub) << ByRef(sub))
    >>> into_string(page)
    'abcdeabcde'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from hornbook.builder import TemplateBuilder


@runtime_checkable
class RenderOnce(Protocol):
    """Something that can be rendered once."""

    def render_once(self, tmpl: TemplateBuilder) -> None:
        """Render into ``tmpl``. The producer must not be used afterwards."""
        ...

    def size_hint(self) -> int:
        """Rough, advisory estimate of the output length.

        Pure. Called at most once, before ``render_once()``.
        """
        return 0


@runtime_checkable
class RenderMut(RenderOnce, Protocol):
    """Something that can be rendered repeatedly through exclusive access."""

    def render_mut(self, tmpl: TemplateBuilder) -> None:
        """Render into ``tmpl``. May update the producer's own state."""
        ...


@runtime_checkable
class Render(RenderMut, Protocol):
    """Something that can be rendered repeatedly through shared access."""

    def render(self, tmpl: TemplateBuilder) -> None:
        """Render into ``tmpl`` without changing the producer."""
        ...


def supports(producer: object, method: str) -> bool:
    """True if ``producer`` has a callable ``method``."""
    if isinstance(producer, type):
        return False
    return callable(getattr(producer, method, None))


def size_hint_of(producer: object) -> int:
    """Size hint of ``producer``, 0 when it does not provide one."""
    size_hint = getattr(producer, "size_hint", None)
    if size_hint is None:
        return 0
    return size_hint()


def as_producer(value: object) -> RenderOnce:
    """Coerce a value into a producer.

    Producers pass through unchanged. ``None`` renders nothing, ``str``
    renders escaped and ``int``/``float`` render their ``str()`` escaped.

    Raises:
        TypeError: For ``bool`` and any other non-producer value.
    """
    from hornbook.leaves import Text

    if supports(value, "render_once"):
        return value  # type: ignore[return-value]
    if value is None:
        return Text("")
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Text(str(value))
    msg = f"{type(value).__name__} object is not renderable"
    raise TypeError(msg)


def render_once(value: object, tmpl: TemplateBuilder) -> None:
    """Coerce ``value`` and render it once into ``tmpl``."""
    as_producer(value).render_once(tmpl)


class ByMut:
    """Exclusive reference to a ``RenderMut`` producer.

    Consuming the reference performs exactly one ``render_mut()`` call on
    the wrapped producer.
    """

    __slots__ = ("_inner",)

    def __init__(self, producer: object) -> None:
        inner = as_producer(producer)
        if not supports(inner, "render_mut"):
            msg = f"{type(inner).__name__} cannot be rendered through a mutable reference"
            raise TypeError(msg)
        self._inner = inner

    def render_once(self, tmpl: TemplateBuilder) -> None:
        self._inner.render_mut(tmpl)

    def size_hint(self) -> int:
        return size_hint_of(self._inner)

    def __repr__(self) -> str:
        return f"ByMut({self._inner!r})"


class ByRef:
    """Shared reference to a ``Render`` producer.

    Consuming the reference performs exactly one ``render()`` call on the
    wrapped producer.
    """

    __slots__ = ("_inner",)

    def __init__(self, producer: object) -> None:
        inner = as_producer(producer)
        if not supports(inner, "render"):
            msg = f"{type(inner).__name__} cannot be rendered through a shared reference"
            raise TypeError(msg)
        self._inner = inner

    def render_once(self, tmpl: TemplateBuilder) -> None:
        self._inner.render(tmpl)

    def size_hint(self) -> int:
        return size_hint_of(self._inner)

    def __repr__(self) -> str:
        return f"ByRef({self._inner!r})"


__all__ = [
    "ByMut",
    "ByRef",
    "Render",
    "RenderMut",
    "RenderOnce",
    "as_producer",
    "render_once",
    "size_hint_of",
    "supports",
]
