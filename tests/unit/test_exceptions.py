"""Tests for the exception hierarchy."""

import pytest

from polyglot.exceptions import (
    CacheConnectionError,
    CacheError,
    CommandError,
    ConfigError,
    ConfigValidationError,
    CorpusError,
    CorpusFetchError,
    CorpusFormatError,
    CorpusNotFoundError,
    InvalidArgumentError,
    MatcherUnavailableError,
    PolyglotError,
    SearchError,
)


class TestPolyglotError:
    """Tests for the base exception."""

    def test_default_message(self) -> None:
        """Test that the user message is the default text."""
        error = PolyglotError()
        assert str(error) == "Something went wrong"
        assert error.exit_code == 1

    def test_custom_message(self) -> None:
        """Test a custom internal message."""
        error = PolyglotError("disk on fire")
        assert str(error) == "disk on fire"
        assert error.user_message == "Something went wrong"

    def test_custom_user_message(self) -> None:
        """Test overriding the user-facing message."""
        error = CorpusError("details", user_message="Try again later")
        assert error.user_message == "Try again later"
        assert CorpusError.user_message == "Failed to load words"

    def test_hint(self) -> None:
        """Test class-level hints and per-instance overrides."""
        assert CorpusFetchError().hint is not None
        assert SearchError().hint is None
        error = MatcherUnavailableError(hint="Use --matcher offline")
        assert error.hint == "Use --matcher offline"
        assert MatcherUnavailableError.hint is None


class TestExitCodes:
    """Tests for exit codes per family."""

    @pytest.mark.parametrize(
        ("error_class", "exit_code"),
        [
            (CacheError, 10),
            (CacheConnectionError, 11),
            (ConfigError, 20),
            (ConfigValidationError, 22),
            (CorpusError, 30),
            (CorpusNotFoundError, 31),
            (CorpusFormatError, 32),
            (CorpusFetchError, 33),
            (SearchError, 40),
            (MatcherUnavailableError, 41),
            (CommandError, 50),
            (InvalidArgumentError, 51),
        ],
    )
    def test_exit_code(self, error_class: type[PolyglotError], exit_code: int) -> None:
        assert error_class().exit_code == exit_code


class TestHierarchy:
    """Tests for exception inheritance."""

    def test_corpus_errors(self) -> None:
        for error_class in (CorpusNotFoundError, CorpusFormatError, CorpusFetchError):
            assert issubclass(error_class, CorpusError)

    def test_matcher_unavailable_is_search_error(self) -> None:
        assert issubclass(MatcherUnavailableError, SearchError)

    def test_can_catch_base_exception(self) -> None:
        """Test that every error can be caught as PolyglotError."""
        with pytest.raises(PolyglotError):
            raise CacheConnectionError("no database")
