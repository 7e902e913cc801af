"""Classification of single Japanese characters.

A :class:`JapaneseCharacter` wraps one character and answers membership
queries against the fixed tables of :mod:`japchar.unicode`: is it a kanji,
is it a kana, of which script (:class:`KanaType`) and of which phonetic
variant (:class:`KanaVariant`).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

from japchar import unicode
from japchar.base import InvalidArgumentError


class KanaType(Enum):
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"


class KanaVariant(Enum):
    NONE = "none"
    TENTEN = "tenten"
    MARU = "maru"
    SMALL = "small"


# (script, variant) -> characters carrying exactly that marking
VARIANT_SETS: Dict[Tuple[KanaType, KanaVariant], FrozenSet[str]] = {
    (KanaType.HIRAGANA, KanaVariant.NONE): frozenset(unicode.HIRAGANAS_CLASSIC + unicode.HIRAGANAS_OLD),
    (KanaType.HIRAGANA, KanaVariant.TENTEN): frozenset(unicode.HIRAGANAS_TENTEN),
    (KanaType.HIRAGANA, KanaVariant.MARU): frozenset(unicode.HIRAGANAS_MARU),
    (KanaType.HIRAGANA, KanaVariant.SMALL): frozenset(unicode.HIRAGANAS_SMALL),
    (KanaType.KATAKANA, KanaVariant.NONE): frozenset(unicode.KATAKANAS_CLASSIC + unicode.KATAKANAS_OLD),
    (KanaType.KATAKANA, KanaVariant.TENTEN): frozenset(unicode.KATAKANAS_TENTEN),
    (KanaType.KATAKANA, KanaVariant.MARU): frozenset(unicode.KATAKANAS_MARU),
    (KanaType.KATAKANA, KanaVariant.SMALL): frozenset(unicode.KATAKANAS_SMALL),
}


def check_kana_type(kana_type, allow_any: bool = False) -> None:
    """Reject anything that is not a :class:`KanaType` (``None`` only if *allow_any*)."""
    if kana_type is None and allow_any:
        return
    if not isinstance(kana_type, KanaType):
        raise InvalidArgumentError("kana type", kana_type, f"expected one of {[t.name for t in KanaType]}")


def check_kana_variant(variant, allow_any: bool = False) -> None:
    """Reject anything that is not a :class:`KanaVariant` (``None`` only if *allow_any*)."""
    if variant is None and allow_any:
        return
    if not isinstance(variant, KanaVariant):
        raise InvalidArgumentError("kana variant", variant, f"expected one of {[v.name for v in KanaVariant]}")


@dataclass(frozen=True)
class JapaneseCharacter:
    """Immutable wrapper of a single character, compared by code point."""
    char: str

    def __post_init__(self):
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise InvalidArgumentError("character", self.char, "expected a single character string")

    @property
    def code_point(self) -> int:
        return ord(self.char)

    def __str__(self) -> str:
        return self.char

    def is_kanji(self) -> bool:
        return (unicode.in_range(self.code_point, unicode.KANJI_RANGE)
                or unicode.in_range(self.code_point, unicode.KANJI_RARE_RANGE))

    def is_kana(self, kana_type: Optional[KanaType] = None, variant: Optional[KanaVariant] = None) -> bool:
        """Check whether this character is a kana of the given type and variant.

        Args:
            kana_type: Script to match, or ``None`` to match either script
            variant: Variant to match, or ``None`` to match any variant

        Returns:
            True if some (type, variant) combination allowed by the
            arguments lists this character

        Raises:
            InvalidArgumentError: If an argument is neither ``None`` nor a
                member of its enumeration
        """
        check_kana_type(kana_type, allow_any=True)
        check_kana_variant(variant, allow_any=True)

        types = [kana_type] if kana_type is not None else list(KanaType)
        variants = [variant] if variant is not None else list(KanaVariant)
        return any(self.char in VARIANT_SETS[(t, v)] for t in types for v in variants)

    def get_kana_type(self) -> Optional[KanaType]:
        """Return the script of this kana, or None if it is not a kana."""
        for kana_type in KanaType:
            if self.is_kana(kana_type):
                return kana_type
        return None

    def get_kana_variant(self) -> Optional[KanaVariant]:
        """Return the variant of this kana, or None if it is not a kana."""
        for variant in KanaVariant:
            if self.is_kana(variant=variant):
                return variant
        return None

    # Conversions live in the factory; these are shortcuts for single calls.
    def to_variant(self, variant: KanaVariant) -> Optional["JapaneseCharacter"]:
        from japchar.factory import KanaFactory
        return KanaFactory().to_variant(self, variant)

    def to_type(self, kana_type: KanaType) -> Optional["JapaneseCharacter"]:
        from japchar.factory import KanaFactory
        return KanaFactory().to_type(self, kana_type)

    def transform(self, kana_type: KanaType, variant: KanaVariant) -> Optional["JapaneseCharacter"]:
        from japchar.factory import KanaFactory
        return KanaFactory().transform(self, kana_type, variant)
