"""Render escaped text and raw markup — zero config, zero deps."""

from hornbook import Raw, into_string, new_renderer

page = new_renderer(32, lambda t: t << Raw("<h1>") << "Fish & Chips" << Raw("</h1>"))
print(into_string(page))
