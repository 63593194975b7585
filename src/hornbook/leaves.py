"""Leaf producers: escaped text and raw markup.

Plain text is escaped unless explicitly wrapped in ``Raw``. Both leaves
support all three rendering capabilities and write the same thing no
matter which one is used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hornbook.template import Template

if TYPE_CHECKING:
    from hornbook.builder import TemplateBuilder


class Text(Template):
    """Text content, always written through the escaping write.

    ``str`` values are coerced to ``Text`` wherever a producer is expected.
    """

    __slots__ = ("content",)

    def __init__(self, content: str) -> None:
        self.content = content

    def render_once(self, tmpl: TemplateBuilder) -> None:
        tmpl.write_str(self.content)

    def render_mut(self, tmpl: TemplateBuilder) -> None:
        tmpl.write_str(self.content)

    def render(self, tmpl: TemplateBuilder) -> None:
        tmpl.write_str(self.content)

    def size_hint(self) -> int:
        return len(self.content)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Text):
            return NotImplemented
        return self.content == other.content

    def __hash__(self) -> int:
        return hash((Text, self.content))

    def __repr__(self) -> str:
        return f"Text({self.content!r})"


class Raw(Template):
    """Raw content marker.

    When rendered, raw content is not escaped. Use it for trusted or
    already rendered markup.

    Example:
        >>> Raw("<b>").into_string()
        '<b>'
    """

    __slots__ = ("content",)

    def __init__(self, content: object) -> None:
        """Mark ``content`` as raw. Any object is written via ``str()``."""
        self.content = content

    def render_once(self, tmpl: TemplateBuilder) -> None:
        tmpl.write_raw(str(self.content))

    def render_mut(self, tmpl: TemplateBuilder) -> None:
        tmpl.write_raw(str(self.content))

    def render(self, tmpl: TemplateBuilder) -> None:
        tmpl.write_raw(str(self.content))

    def size_hint(self) -> int:
        return len(str(self.content))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Raw):
            return NotImplemented
        return self.content == other.content

    def __hash__(self) -> int:
        return hash((Raw, self.content))

    def __repr__(self) -> str:
        return f"Raw({self.content!r})"


__all__ = ["Raw", "Text"]
