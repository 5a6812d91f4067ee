"""Tests for ContextVar-based lex configuration.

Validates thread isolation, context manager behavior, and the effect of
each option on the token stream.
"""

import logging
from threading import Thread

import pytest

from coolex import (
    LexConfig,
    get_lex_config,
    lex,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from coolex.tokens import TokenKind


class TestLexConfigDataclass:
    def test_default_values(self) -> None:
        config = LexConfig()
        assert config.keep_trivia is True
        assert config.log_errors is False
        assert config.source_file is None

    def test_immutability(self) -> None:
        config = LexConfig()
        with pytest.raises(AttributeError):
            config.keep_trivia = False  # type: ignore[misc]


class TestFromDict:
    def test_from_dict_basic(self) -> None:
        config = LexConfig.from_dict({"keep_trivia": False, "source_file": "a.cl"})
        assert config.keep_trivia is False
        assert config.source_file == "a.cl"
        assert config.log_errors is False

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = LexConfig.from_dict({"log_errors": True, "unknown_key": 42})
        assert config.log_errors is True

    def test_from_dict_empty(self) -> None:
        assert LexConfig.from_dict({}) == LexConfig()


class TestContextVarFunctions:
    def teardown_method(self) -> None:
        reset_lex_config()

    def test_default_config(self) -> None:
        assert get_lex_config() == LexConfig()

    def test_set_and_get(self) -> None:
        set_lex_config(LexConfig(keep_trivia=False))
        assert get_lex_config().keep_trivia is False

    def test_reset_restores_default(self) -> None:
        set_lex_config(LexConfig(keep_trivia=False))
        reset_lex_config()
        assert get_lex_config().keep_trivia is True


class TestLexConfigContext:
    def test_context_sets_config(self) -> None:
        with lex_config_context(LexConfig(keep_trivia=False)):
            assert get_lex_config().keep_trivia is False
        assert get_lex_config().keep_trivia is True

    def test_nested_contexts(self) -> None:
        with lex_config_context(LexConfig(keep_trivia=False)):
            with lex_config_context(LexConfig(log_errors=True)):
                assert get_lex_config().log_errors is True
                assert get_lex_config().keep_trivia is True
            assert get_lex_config().keep_trivia is False
        assert get_lex_config() == LexConfig()

    def test_context_restores_on_exception(self) -> None:
        with pytest.raises(ValueError, match="test"):
            with lex_config_context(LexConfig(keep_trivia=False)):
                raise ValueError("test")
        assert get_lex_config().keep_trivia is True


class TestKeepTrivia:
    def test_trivia_dropped(self) -> None:
        with lex_config_context(LexConfig(keep_trivia=False)):
            pairs = lex("a (* c *) b -- d\n")

        assert [token.kind for token, _ in pairs] == [TokenKind.OBJECT_ID, TokenKind.OBJECT_ID]

    def test_lines_still_counted(self) -> None:
        with lex_config_context(LexConfig(keep_trivia=False)):
            pairs = lex("a\n(* \n *)\nb")

        assert [context.line_number for _, context in pairs] == [1, 4]

    def test_errors_are_not_trivia(self) -> None:
        with lex_config_context(LexConfig(keep_trivia=False)):
            pairs = lex("# ")

        assert [token.kind for token, _ in pairs] == [TokenKind.ERROR]


class TestLogErrors:
    def test_errors_logged_when_enabled(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="coolex"):
            with lex_config_context(LexConfig(log_errors=True, source_file="t.cl")):
                lex("x\n#")

        assert "t.cl:2: #" in caplog.text

    def test_errors_silent_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="coolex"):
            lex("#")

        assert caplog.records == []


class TestThreadIsolation:
    def test_thread_isolation(self) -> None:
        results: dict[int, int] = {}

        def worker(thread_id: int, keep_trivia: bool) -> None:
            set_lex_config(LexConfig(keep_trivia=keep_trivia))
            results[thread_id] = len(lex("a b c"))

        threads = [Thread(target=worker, args=(i, i % 2 == 0)) for i in range(6)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {0: 5, 1: 3, 2: 5, 3: 3, 4: 5, 5: 3}
        # Main thread unaffected
        assert get_lex_config().keep_trivia is True
