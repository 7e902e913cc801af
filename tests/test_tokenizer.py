"""Tests for character splitting."""
from japchar.character import JapaneseCharacter
from japchar.tokenizer import CharacterTokenizer, split_text


class TestSplitText:
    """Test split_text."""

    def test_preserves_order_and_duplicates(self):
        """Test characters come back in input order, repeats included."""
        assert split_text("01213") == ["0", "1", "2", "1", "3"]

    def test_japanese_text(self):
        """Test mixed kana and kanji text is split per character."""
        assert split_text("ひらがなカタカナ漢字") == ["ひ", "ら", "が", "な", "カ", "タ", "カ", "ナ", "漢", "字"]

    def test_empty_text(self):
        """Test empty or missing text gives an empty list."""
        assert split_text("") == []
        assert split_text(None) == []


class TestCharacterTokenizer:
    """Test CharacterTokenizer."""

    def test_returns_strings_by_default(self):
        """Test tokens are plain strings unless wrapping is asked for."""
        assert CharacterTokenizer().tokenize("かな") == ["か", "な"]

    def test_wraps_characters(self):
        """Test wrap=True yields JapaneseCharacter values."""
        tokens = CharacterTokenizer(wrap=True).tokenize("かな")
        assert tokens == [JapaneseCharacter("か"), JapaneseCharacter("な")]

    def test_empty_text(self):
        """Test empty text gives no tokens."""
        assert CharacterTokenizer(wrap=True).tokenize("") == []
