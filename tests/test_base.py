"""Tests for base classes and exceptions."""
import pytest
from japchar.base import BaseTokenizer, InvalidArgumentError, NullOrEmptyError
from japchar.tokenizer import CharacterTokenizer


class TestExceptions:
    """Test the error taxonomy."""

    def test_invalid_argument_error(self):
        """Test InvalidArgumentError keeps the rejected argument and explains it."""
        error = InvalidArgumentError("kana variant", "tenten", "expected an enum member")
        assert error.argument == "kana variant"
        assert error.value == "tenten"
        assert error.reason == "expected an enum member"
        assert "kana variant" in str(error)
        assert "'tenten'" in str(error)
        assert isinstance(error, ValueError)

    def test_null_or_empty_is_invalid_argument(self):
        """Test NullOrEmptyError can be caught as InvalidArgumentError."""
        error = NullOrEmptyError("romaji", "")
        assert isinstance(error, InvalidArgumentError)
        assert error.argument == "romaji"
        assert "non-empty" in str(error)


class TestTokenizerContract:
    """Test that CharacterTokenizer fulfils the BaseTokenizer contract."""

    def test_character_tokenizer_is_a_base_tokenizer(self):
        """Test CharacterTokenizer can be used wherever a BaseTokenizer is expected."""
        assert issubclass(CharacterTokenizer, BaseTokenizer)
        assert isinstance(CharacterTokenizer(), BaseTokenizer)

    def test_character_tokenizer_implements_tokenize(self):
        """Test tokenize is concrete on CharacterTokenizer and abstract on the base."""
        assert getattr(BaseTokenizer.tokenize, '__isabstractmethod__', False)
        assert not getattr(CharacterTokenizer.tokenize, '__isabstractmethod__', False)

    def test_tokenize_through_base_type(self):
        """Test tokenizing through a BaseTokenizer reference splits per character."""
        tokenizer: BaseTokenizer = CharacterTokenizer()
        assert tokenizer.tokenize("がっこう") == ["が", "っ", "こ", "う"]
