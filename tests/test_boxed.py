"""Tests for erasure handles."""

from __future__ import annotations

import pytest

from hornbook import (
    BoxMut,
    BoxOnce,
    BoxRef,
    ByMut,
    ByRef,
    ConsumedError,
    Multiplicity,
    Raw,
    Render,
    RenderMut,
    StringBuilder,
    TemplateBuilder,
    boxed,
    into_string,
    new_boxed_renderer,
    new_renderer,
)


def _builder() -> tuple[StringBuilder, TemplateBuilder]:
    sb = StringBuilder()
    return sb, TemplateBuilder(sb.append)


class TestBoxOnce:
    def test_output_matches_unboxed(self) -> None:
        make = lambda: new_renderer(0, lambda t: t << Raw("<p>") << "<x>" << Raw("</p>"))
        assert into_string(BoxOnce(make())) == into_string(make()) == "<p>&lt;x&gt;</p>"

    def test_single_use(self) -> None:
        handle = BoxOnce(Raw("a"))
        assert into_string(handle) == "a"
        assert handle.spent
        with pytest.raises(ConsumedError):
            into_string(handle)

    def test_only_once_tier(self) -> None:
        handle = BoxOnce(Raw("a"))
        assert not isinstance(handle, RenderMut)

    def test_forwards_size_hint(self) -> None:
        assert BoxOnce(new_renderer(42, lambda t: None)).size_hint() == 42

    def test_repr_after_release(self) -> None:
        handle = BoxOnce("a")
        assert repr(handle) == "BoxOnce(Text('a'))"
        handle.into_string()
        assert repr(handle) == "BoxOnce(<spent>)"


class TestBoxMut:
    def test_repeated_then_consumed(self) -> None:
        calls: list[int] = []

        def bump(tmpl: TemplateBuilder) -> None:
            calls.append(len(calls))
            tmpl.write_str(str(len(calls)))

        handle = BoxMut(new_renderer(0, bump, Multiplicity.MUT))
        sb, tmpl = _builder()
        handle.render_mut(tmpl)
        handle.render_mut(tmpl)
        handle.render_once(tmpl)
        assert sb.build() == "123"
        with pytest.raises(ConsumedError):
            handle.render_mut(tmpl)

    def test_usable_through_by_mut(self) -> None:
        handle = BoxMut(new_renderer(0, lambda t: t.write_str("m"), Multiplicity.MUT))
        assert into_string(ByMut(handle)) == "m"
        assert into_string(ByMut(handle)) == "m"
        assert not handle.spent

    def test_rejects_once_producer(self) -> None:
        with pytest.raises(TypeError, match="RenderMut"):
            BoxMut(new_renderer(0, lambda t: None))

    def test_tiers(self) -> None:
        handle = BoxMut(Raw("a"))
        assert isinstance(handle, RenderMut)
        assert not isinstance(handle, Render)


class TestBoxRef:
    def test_all_tiers_forward_to_render(self) -> None:
        handle = BoxRef(Raw("<b>"))
        sb, tmpl = _builder()
        handle.render(tmpl)
        handle.render_mut(tmpl)
        handle.render_once(tmpl)
        assert sb.build() == "<b><b><b>"
        assert handle.spent

    def test_embedded_twice_by_ref(self) -> None:
        handle = BoxRef(new_renderer(0, lambda t: t.write_str("ab"), Multiplicity.PURE))
        page = new_renderer(0, lambda t: t << ByRef(handle) << ByRef(handle))
        assert into_string(page) == "abab"

    def test_rejects_mut_producer(self) -> None:
        with pytest.raises(TypeError, match="Render producer"):
            BoxRef(new_renderer(0, lambda t: None, Multiplicity.MUT))

    def test_forwards_size_hint(self) -> None:
        assert BoxRef("hello").size_hint() == 5


class TestBoxedHelpers:
    def test_boxed_picks_strongest_shape(self) -> None:
        assert type(boxed("x")) is BoxRef
        assert type(boxed(new_renderer(0, lambda t: None, Multiplicity.MUT))) is BoxMut
        assert type(boxed(new_renderer(0, lambda t: None))) is BoxOnce

    def test_heterogeneous_list(self) -> None:
        parts = [
            boxed(Raw("<hr>")),
            boxed("a & b"),
            boxed(new_renderer(0, lambda t: t.write_raw("<br>"))),
        ]
        page = new_renderer(0, lambda t: [t << p for p in parts])
        assert into_string(page) == "<hr>a &amp; b<br>"

    @pytest.mark.parametrize(
        ("kind", "handle_type"),
        [
            (Multiplicity.ONCE, BoxOnce),
            (Multiplicity.MUT, BoxMut),
            (Multiplicity.PURE, BoxRef),
        ],
    )
    def test_new_boxed_renderer(self, kind: Multiplicity, handle_type: type) -> None:
        handle = new_boxed_renderer(9, lambda t: t.write_str("<boxed>"), kind)
        assert type(handle) is handle_type
        assert handle.size_hint() == 9
        assert into_string(handle) == "&lt;boxed&gt;"
