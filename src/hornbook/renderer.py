"""Closure-based producers.

A renderer pairs a callable taking the sink with a fixed size estimate,
so markup generators can build producers without declaring a named type
for every fragment. Python cannot see how often a callable may safely be
called, so the generator declares it with ``Multiplicity``; the tier of
the resulting renderer mirrors that declaration:

=================  ===============  ===================================
Multiplicity       Class            Capabilities
=================  ===============  ===================================
``ONCE`` (default) ``Renderer``     RenderOnce
``MUT``            ``MutRenderer``  RenderOnce, RenderMut
``PURE``           ``PureRenderer`` RenderOnce, RenderMut, Render
=================  ===============  ===================================

Example:
    >>> greeting = new_renderer(
    ...     11, lambda t: t << Raw("<b>") << "hi" << Raw("</b>"), Multiplicity.PURE
    ... )
    >>> str(greeting)
    '<b>hi</b>'
    >>> f"{greeting}!"
    '<b>hi</b>!'
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any

from hornbook.boxed import BoxMut, BoxOnce, BoxRef
from hornbook.errors import ConsumedError
from hornbook.render import ByRef
from hornbook.template import Template, into_string

if TYPE_CHECKING:
    from hornbook.builder import TemplateBuilder

RenderFunc = Callable[["TemplateBuilder"], Any]


class Multiplicity(Enum):
    """How many times a render callable may be called."""

    ONCE = "once"
    """Exactly once."""

    MUT = "mut"
    """Many times; each call may update the callable's own state."""

    PURE = "pure"
    """Many times, without side effects on the callable."""


class Renderer(Template):
    """Producer backed by a call-once callable.

    The callable is released after its single call; rendering again
    raises ``ConsumedError``.
    """

    __slots__ = ("_func", "_expected_size")

    def __init__(self, func: RenderFunc, expected_size: int = 0) -> None:
        self._func: RenderFunc | None = func
        self._expected_size = max(expected_size, 0)

    def render_once(self, tmpl: TemplateBuilder) -> None:
        func = self._func
        if func is None:
            raise ConsumedError(self)
        self._func = None
        func(tmpl)

    def size_hint(self) -> int:
        return self._expected_size

    def __repr__(self) -> str:
        func = "<spent>" if self._func is None else repr(self._func)
        return f"{type(self).__name__}({func}, expected_size={self._expected_size})"


class MutRenderer(Renderer):
    """Producer backed by a callable that may be called repeatedly."""

    __slots__ = ()

    def render_once(self, tmpl: TemplateBuilder) -> None:
        self._func(tmpl)  # type: ignore[misc]

    def render_mut(self, tmpl: TemplateBuilder) -> None:
        self._func(tmpl)  # type: ignore[misc]


class PureRenderer(MutRenderer):
    """Producer backed by a side-effect-free callable.

    Usable anywhere a displayable value is expected: ``str()``,
    ``format()`` and f-strings render it, and ``write_to_io()`` forwards
    every chunk straight to the stream.
    """

    __slots__ = ()

    def render(self, tmpl: TemplateBuilder) -> None:
        self._func(tmpl)  # type: ignore[misc]

    def __str__(self) -> str:
        return into_string(ByRef(self))

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


_RENDERER_TYPES: dict[Multiplicity, type[Renderer]] = {
    Multiplicity.ONCE: Renderer,
    Multiplicity.MUT: MutRenderer,
    Multiplicity.PURE: PureRenderer,
}

_HANDLE_TYPES: dict[Multiplicity, type[BoxOnce | BoxMut | BoxRef]] = {
    Multiplicity.ONCE: BoxOnce,
    Multiplicity.MUT: BoxMut,
    Multiplicity.PURE: BoxRef,
}


def new_renderer(
    expected_size: int,
    func: RenderFunc,
    kind: Multiplicity = Multiplicity.ONCE,
) -> Renderer:
    """Create a renderer.

    Args:
        expected_size: Size estimate returned by ``size_hint()``; negative
            values are clamped to 0
        func: Callable taking the sink
        kind: Declared call multiplicity of ``func``

    Returns:
        A ``Renderer``, ``MutRenderer`` or ``PureRenderer`` matching ``kind``
    """
    return _RENDERER_TYPES[kind](func, expected_size)


def new_boxed_renderer(
    expected_size: int,
    func: RenderFunc,
    kind: Multiplicity = Multiplicity.ONCE,
) -> BoxOnce | BoxMut | BoxRef:
    """Create a renderer already behind the matching erasure handle."""
    return _HANDLE_TYPES[kind](new_renderer(expected_size, func, kind))


def producer(
    *,
    expected_size: int = 0,
    kind: Multiplicity = Multiplicity.ONCE,
) -> Callable[[RenderFunc], Renderer]:
    """Decorator turning a render function into a renderer.

    Example:
        >>> @producer(expected_size=12, kind=Multiplicity.PURE)
        ... def footer(tmpl):
        ...     tmpl << Raw("<footer>") << "(c)" << Raw("</footer>")
        >>> str(footer)
        '<footer>(c)</footer>'
    """

    def decorator(func: RenderFunc) -> Renderer:
        return new_renderer(expected_size, func, kind)

    return decorator


__all__ = [
    "Multiplicity",
    "MutRenderer",
    "PureRenderer",
    "RenderFunc",
    "Renderer",
    "new_boxed_renderer",
    "new_renderer",
    "producer",
]
