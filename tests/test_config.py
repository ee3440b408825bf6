"""Tests for ContextVar-based tokenizer configuration.

Validates defaults, validation, thread isolation and context manager behavior.
"""

from threading import Thread

import pytest

from bigote import (
    LexConfig,
    Tokenizer,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
    tokenize,
)
from bigote.errors import ConfigError, UnrecognizedTagContentError
from bigote.tokens import L_MUSTACHE, R_MUSTACHE, Id, Text


class TestLexConfigDataclass:
    """Test LexConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = LexConfig()
        assert config.open_delim == "{{"
        assert config.close_delim == "}}"
        assert config.strict is False

    def test_immutability(self) -> None:
        config = LexConfig()
        with pytest.raises(AttributeError):
            config.open_delim = "<%"  # type: ignore[misc]

    @pytest.mark.parametrize("field", ["open_delim", "close_delim"])
    def test_empty_delimiter_rejected(self, field: str) -> None:
        with pytest.raises(ConfigError, match=field):
            LexConfig(**{field: ""})

    def test_non_string_delimiter_rejected(self) -> None:
        with pytest.raises(ConfigError, match="must be a str"):
            LexConfig(open_delim=None)  # type: ignore[arg-type]


class TestLexConfigFromDict:
    """Test LexConfig.from_dict() factory method."""

    def test_from_dict_basic(self) -> None:
        config = LexConfig.from_dict({"open_delim": "<%", "close_delim": "%>"})
        assert config.open_delim == "<%"
        assert config.close_delim == "%>"
        assert config.strict is False

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = LexConfig.from_dict({"strict": True, "unknown_key": "ignored"})
        assert config.strict is True

    def test_from_dict_empty(self) -> None:
        assert LexConfig.from_dict({}) == LexConfig()

    def test_from_dict_validates(self) -> None:
        with pytest.raises(ConfigError):
            LexConfig.from_dict({"close_delim": ""})


class TestContextConfig:
    """Test get/set/reset and the context manager."""

    def teardown_method(self) -> None:
        reset_lex_config()

    def test_default_config(self) -> None:
        assert get_lex_config() == LexConfig()

    def test_set_and_reset(self) -> None:
        custom = LexConfig(open_delim="<%", close_delim="%>")
        set_lex_config(custom)
        assert get_lex_config() is custom
        reset_lex_config()
        assert get_lex_config() == LexConfig()

    def test_context_manager_restores(self) -> None:
        custom = LexConfig(strict=True)
        with lex_config_context(custom):
            assert get_lex_config() is custom
        assert get_lex_config() == LexConfig()

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with lex_config_context(LexConfig(strict=True)):
                raise RuntimeError("boom")
        assert get_lex_config().strict is False

    def test_tokenizer_uses_active_config(self) -> None:
        with lex_config_context(LexConfig(open_delim="<%", close_delim="%>")):
            tokens = list(Tokenizer("a<%b%>"))
        assert tokens == [Text("a"), L_MUSTACHE, Id("b"), R_MUSTACHE]

    def test_arguments_override_config(self) -> None:
        with lex_config_context(LexConfig(open_delim="<%", close_delim="%>", strict=True)):
            tokenizer = Tokenizer("{{!}}", "{{", "}}", strict=False)
        assert tokenizer.open_delim == "{{"
        assert list(tokenizer) == [L_MUSTACHE]

    def test_partial_override_keeps_other_fields(self) -> None:
        with lex_config_context(LexConfig(open_delim="<%", close_delim="%>")):
            tokenizer = Tokenizer("", strict=True)
        assert tokenizer.open_delim == "<%"
        assert tokenizer.close_delim == "%>"

    def test_invalid_argument_rejected(self) -> None:
        with pytest.raises(ConfigError):
            Tokenizer("abc", "", "}}")

    def test_config_read_once_at_construction(self) -> None:
        tokenizer = Tokenizer("{{a}}")
        with lex_config_context(LexConfig(open_delim="<%", close_delim="%>")):
            tokens = list(tokenizer)
        assert tokens == [L_MUSTACHE, Id("a"), R_MUSTACHE]

    def test_strict_via_config(self) -> None:
        with lex_config_context(LexConfig(strict=True)):
            with pytest.raises(UnrecognizedTagContentError):
                tokenize("{{!}}")

    def test_thread_isolation(self) -> None:
        """Each thread sees its own config."""
        results: dict[int, tuple[str, bool]] = {}

        def worker(thread_id: int, config: LexConfig) -> None:
            set_lex_config(config)
            tokenizer = Tokenizer("")
            results[thread_id] = (tokenizer.open_delim, tokenizer.strict)

        configs = [
            LexConfig(open_delim="<%", close_delim="%>", strict=True),
            LexConfig(open_delim="[[", close_delim="]]"),
            LexConfig(strict=True),
        ]

        threads = [Thread(target=worker, args=(i, c)) for i, c in enumerate(configs)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results[0] == ("<%", True)
        assert results[1] == ("[[", False)
        assert results[2] == ("{{", True)
