"""Text escaping for Hornbook.

Example:
    >>> from hornbook.utils.text import escape_html
    >>> escape_html('<a href="x">')
    '&lt;a href=&quot;x&quot;&gt;'
"""

from __future__ import annotations

import html as html_module


def escape_html(text: str, *, single_quotes: bool = False) -> str:
    """Escape HTML special characters.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27; (only when ``single_quotes`` is set)

    Args:
        text: Text to escape
        single_quotes: Also escape single quotes

    Returns:
        Escaped text, safe for element content and double-quoted attributes

    Examples:
        >>> escape_html("<b>")
        '&lt;b&gt;'
        >>> escape_html("it's", single_quotes=True)
        'it&#x27;s'
    """
    if not text:
        return ""

    escaped = html_module.escape(text, quote=False).replace('"', "&quot;")
    if single_quotes:
        escaped = escaped.replace("'", "&#x27;")
    return escaped
