"""Splitting text into individual characters."""

from typing import List, Union

from japchar.base import BaseTokenizer
from japchar.character import JapaneseCharacter


def split_text(text: str) -> List[str]:
    """Return the characters of *text* in order (empty list for empty text)."""
    if not text:
        return []
    return list(text)


class CharacterTokenizer(BaseTokenizer):
    """Tokenizer yielding one token per character."""

    def __init__(self, wrap: bool = False):
        """
        Args:
            wrap: Return :class:`JapaneseCharacter` values instead of strings
        """
        self.wrap = wrap

    def tokenize(self, text: str) -> List[Union[str, JapaneseCharacter]]:
        characters = split_text(text)
        if self.wrap:
            return [JapaneseCharacter(c) for c in characters]
        return characters
