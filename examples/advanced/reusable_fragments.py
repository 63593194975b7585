"""Embed one fragment many times, and mix producers chosen at runtime."""

import sys

from hornbook import ByRef, Multiplicity, Raw, boxed, new_renderer, write_to_io

divider = new_renderer(4, lambda t: t.write_raw("<hr>"), Multiplicity.PURE)

sections = [
    boxed("Plain <text> is escaped"),
    boxed(Raw("<em>Raw markup is not</em>")),
    boxed(new_renderer(0, lambda t: t.write_fmt("{} + {} = {}", 1, 2, 3))),
]


def body(tmpl):
    for section in sections:
        tmpl << Raw("<p>") << section << Raw("</p>") << ByRef(divider)


write_to_io(new_renderer(256, body), sys.stdout)
print()
