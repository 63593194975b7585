"""StringBuilder for O(n) string accumulation.

The default output buffer behind ``into_string()``. Appends to a list and
joins once at the end: O(n) total vs O(n²) for repeated string concatenation.

Thread Safety:
StringBuilder instances are local to each finalization call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Appends to a list, joins once at the end.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<p>")
            >>> sb.append("Hello")
            >>> sb.append("</p>")
            >>> sb.build()
            '<p>Hello</p>'

    Thread Safety:
        Instance is local to each finalization call.
        No shared mutable state.

    """

    __slots__ = ("_parts", "_reserved")

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []
        self._reserved = 0

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def reserve(self, size: int) -> StringBuilder:
        """Record the expected output size.

        Python lists grow on their own, so this only keeps the largest
        reservation seen for diagnostics.

        Returns:
            self for method chaining
        """
        self._reserved = max(self._reserved, size)
        return self

    @property
    def reserved(self) -> int:
        """Largest size passed to reserve()."""
        return self._reserved

    def build(self) -> str:
        """Join all parts into final string.

        Returns:
            Concatenated string of all appended parts
        """
        return "".join(self._parts)

    def clear(self) -> StringBuilder:
        """Clear all accumulated parts.

        Returns:
            self for method chaining
        """
        self._parts.clear()
        self._reserved = 0
        return self

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)
