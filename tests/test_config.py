"""Tests for ContextVar-based render configuration."""

from threading import Thread

import pytest

from hornbook import (
    RenderConfig,
    TemplateBuilder,
    get_render_config,
    into_string,
    render_config_context,
    reset_render_config,
    set_render_config,
)


class TestRenderConfigDataclass:
    """Test RenderConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = RenderConfig()
        assert config.escape_single_quotes is False
        assert config.max_size_hint == 1 << 20

    def test_immutability(self) -> None:
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.escape_single_quotes = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = RenderConfig.from_dict({"max_size_hint": 8, "unknown_key": "ignored"})
        assert config.max_size_hint == 8
        assert config.escape_single_quotes is False

    @pytest.mark.parametrize(
        ("hint", "expected"),
        [(-1, 0), (0, 0), (7, 7), (100, 10)],
    )
    def test_clamp_size_hint(self, hint: int, expected: int) -> None:
        assert RenderConfig(max_size_hint=10).clamp_size_hint(hint) == expected


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_set_and_reset(self) -> None:
        config = RenderConfig(escape_single_quotes=True)
        set_render_config(config)
        try:
            assert get_render_config() is config
        finally:
            reset_render_config()
        assert get_render_config() == RenderConfig()

    def test_context_manager_restores(self) -> None:
        before = get_render_config()
        with render_config_context(RenderConfig(max_size_hint=1)):
            assert get_render_config().max_size_hint == 1
        assert get_render_config() is before

    def test_context_manager_restores_on_error(self) -> None:
        before = get_render_config()
        with pytest.raises(RuntimeError):
            with render_config_context(RenderConfig(max_size_hint=1)):
                raise RuntimeError("boom")
        assert get_render_config() is before

    def test_set_in_thread_does_not_leak(self) -> None:
        def worker() -> None:
            set_render_config(RenderConfig(escape_single_quotes=True))

        thread = Thread(target=worker)
        thread.start()
        thread.join()
        assert get_render_config().escape_single_quotes is False


class TestConfigEffects:
    def test_escape_single_quotes(self) -> None:
        with render_config_context(RenderConfig(escape_single_quotes=True)):
            assert into_string("it's") == "it&#x27;s"
        assert into_string("it's") == "it's"

    def test_explicit_config_wins(self) -> None:
        config = RenderConfig(escape_single_quotes=True)
        assert into_string("'", config=config) == "&#x27;"

    def test_builder_captures_config_at_creation(self) -> None:
        writes: list[str] = []
        tmpl = TemplateBuilder(writes.append)
        with render_config_context(RenderConfig(escape_single_quotes=True)):
            tmpl.write_str("'")
        assert writes == ["'"]
        assert tmpl.config == RenderConfig()
