"""Japanese phonetic reading utilities."""

from typing import Optional
import jaconv
import pykakasi

from japchar.character import JapaneseCharacter

class KanaPhonetics:
    """Hepburn readings of single kana."""

    def __init__(self):
        """Initialize the phonetics processor with pykakasi."""
        self._kks = pykakasi.kakasi()

    def to_romaji(self, character: JapaneseCharacter) -> Optional[str]:
        """Return the Hepburn reading of *character*, or None if it is not a kana.

        Katakana are folded to hiragana with jaconv first so that both
        scripts read the same way.
        """
        if not character.is_kana():
            return None

        hira = jaconv.kata2hira(character.char)
        # pykakasi on a single character returns a list with one dict
        items = self._kks.convert(hira)
        if not items:
            return None
        return items[0]["hepburn"] or None
