"""Kana conversions between variants, between scripts, and from romaji."""

from typing import Dict, Optional, Tuple

from japchar import unicode
from japchar.base import InvalidArgumentError, NullOrEmptyError
from japchar.character import (
    JapaneseCharacter,
    KanaType,
    KanaVariant,
    check_kana_type,
    check_kana_variant,
)
from japchar.logger import logger

# (script, variant) -> (marked characters, their bases), aligned by position
_VARIANT_PAIRS: Dict[Tuple[KanaType, KanaVariant], Tuple[str, str]] = {
    (KanaType.HIRAGANA, KanaVariant.TENTEN): (unicode.HIRAGANAS_TENTEN, unicode.HIRAGANAS_TENTEN_BASES),
    (KanaType.HIRAGANA, KanaVariant.MARU): (unicode.HIRAGANAS_MARU, unicode.HIRAGANAS_MARU_BASES),
    (KanaType.HIRAGANA, KanaVariant.SMALL): (unicode.HIRAGANAS_SMALL, unicode.HIRAGANAS_SMALL_BASES),
    (KanaType.KATAKANA, KanaVariant.TENTEN): (unicode.KATAKANAS_TENTEN, unicode.KATAKANAS_TENTEN_BASES),
    (KanaType.KATAKANA, KanaVariant.MARU): (unicode.KATAKANAS_MARU, unicode.KATAKANAS_MARU_BASES),
    (KanaType.KATAKANA, KanaVariant.SMALL): (unicode.KATAKANAS_SMALL, unicode.KATAKANAS_SMALL_BASES),
}

# base -> marked, per (script, variant)
TO_VARIANT: Dict[Tuple[KanaType, KanaVariant], Dict[str, str]] = {
    key: dict(zip(bases, marked)) for key, (marked, bases) in _VARIANT_PAIRS.items()
}
# marked -> base, per (script, variant)
TO_BASE: Dict[Tuple[KanaType, KanaVariant], Dict[str, str]] = {
    key: dict(zip(marked, bases)) for key, (marked, bases) in _VARIANT_PAIRS.items()
}

CLASSIC_SYLLABARIES: Dict[KanaType, str] = {
    KanaType.HIRAGANA: unicode.HIRAGANAS_CLASSIC,
    KanaType.KATAKANA: unicode.KATAKANAS_CLASSIC,
}
OLD_SYLLABARIES: Dict[KanaType, str] = {
    KanaType.HIRAGANA: unicode.HIRAGANAS_OLD,
    KanaType.KATAKANA: unicode.KATAKANAS_OLD,
}

# Leading romaji letter -> (variant, replacement for that letter)
ROMAJI_MARKERS: Dict[str, Tuple[KanaVariant, str]] = {
    "+": (KanaVariant.SMALL, ""),
    "p": (KanaVariant.MARU, "h"),
    "v": (KanaVariant.TENTEN, ""),
    "g": (KanaVariant.TENTEN, "k"),
    "z": (KanaVariant.TENTEN, "s"),
    "j": (KanaVariant.TENTEN, "s"),
    "d": (KanaVariant.TENTEN, "t"),
    "b": (KanaVariant.TENTEN, "h"),
}

ROMAJI_ALIASES: Dict[str, str] = {
    "tji": "chi",
    "si": "shi",
    "tzu": "tsu",
}


class KanaFactory:
    """Builds kana from other kana or from romaji.

    Every conversion returns ``None`` when the requested character does not
    exist (e.g. a tenten form of あ). Only malformed arguments raise.
    """

    def to_variant(self, character: JapaneseCharacter, variant: KanaVariant) -> Optional[JapaneseCharacter]:
        """Return *character* carrying *variant*, or None if no such kana exists."""
        check_kana_variant(variant)

        current = character.get_kana_variant()
        if current is None:
            return None
        if current == variant:
            return character

        kana_type = character.get_kana_type()
        if current == KanaVariant.NONE:
            base = character.char
        else:
            base = TO_BASE[(kana_type, current)][character.char]

        if variant == KanaVariant.NONE:
            return JapaneseCharacter(base)

        marked = TO_VARIANT[(kana_type, variant)].get(base)
        return JapaneseCharacter(marked) if marked else None

    def to_type(self, character: JapaneseCharacter, kana_type: KanaType) -> Optional[JapaneseCharacter]:
        """Return the counterpart of *character* in the *kana_type* script.

        The variant is preserved. Katakana-only combinations (ヷヸヹヺ) have
        no hiragana counterpart and give None.
        """
        check_kana_type(kana_type)

        variant = character.get_kana_variant()
        if variant is None:
            return None
        base = self.to_variant(character, KanaVariant.NONE).char
        current_type = character.get_kana_type()

        if base in OLD_SYLLABARIES[current_type]:
            source, destination = OLD_SYLLABARIES[current_type], OLD_SYLLABARIES[kana_type]
        else:
            source, destination = CLASSIC_SYLLABARIES[current_type], CLASSIC_SYLLABARIES[kana_type]

        index = source.index(base)
        if index >= len(destination):
            return None
        return self.to_variant(JapaneseCharacter(destination[index]), variant)

    def transform(self, character: JapaneseCharacter, kana_type: KanaType,
                  variant: KanaVariant) -> Optional[JapaneseCharacter]:
        """Normalize *character*, then move it to *kana_type* and *variant*."""
        check_kana_type(kana_type)
        check_kana_variant(variant)

        base = self.to_variant(character, KanaVariant.NONE)
        if base is None:
            return None
        typed = self.to_type(base, kana_type)
        if typed is None:
            return None
        return self.to_variant(typed, variant)

    def from_romaji(self, romaji: str, kana_type: KanaType) -> JapaneseCharacter:
        """Build the kana spelled by a single romaji syllable.

        A leading ``+`` asks for the small form; voiced and semi-voiced
        consonants (g, z, j, d, b, v, p) select the tenten or maru form of
        the matching unvoiced row. Digraphs such as ``kya`` are rejected.

        Args:
            romaji: Syllable token, case-insensitive
            kana_type: Script of the resulting kana

        Returns:
            The corresponding kana

        Raises:
            NullOrEmptyError: If *romaji* is empty or *kana_type* is missing
            InvalidArgumentError: If the syllable does not spell any kana
        """
        if not romaji:
            raise NullOrEmptyError("romaji", romaji)
        if not isinstance(romaji, str):
            raise InvalidArgumentError("romaji", romaji, "expected a string")
        if kana_type is None:
            raise NullOrEmptyError("kana type")
        check_kana_type(kana_type)

        base = romaji.lower()
        variant = KanaVariant.NONE
        marker = ROMAJI_MARKERS.get(base[0])
        if marker:
            variant, replacement = marker
            base = replacement + base[1:]
        base = ROMAJI_ALIASES.get(base, base)

        hiragana = unicode.ROMAJI_TO_HIRAGANA.get(base)
        result = None
        if hiragana:
            result = self.transform(JapaneseCharacter(hiragana), kana_type, variant)
        if result is None:
            logger.debug(f"Rejected romaji '{romaji}' (base '{base}', {variant.name}) for {kana_type.name}")
            raise InvalidArgumentError(
                "romaji", romaji, f"no {kana_type.value} for base '{base}' with variant {variant.name}"
            )
        return result
