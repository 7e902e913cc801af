"""Batch description of the characters of a text."""

from typing import List, Optional

from japchar.character import JapaneseCharacter, KanaType, KanaVariant
from japchar.factory import KanaFactory
from japchar.phonetics import KanaPhonetics
from japchar.schema import CharacterInfo
from japchar.tokenizer import CharacterTokenizer

_OTHER_TYPE = {
    KanaType.HIRAGANA: KanaType.KATAKANA,
    KanaType.KATAKANA: KanaType.HIRAGANA,
}


def describe_character(character: JapaneseCharacter, factory: Optional[KanaFactory] = None,
                       phonetics: Optional[KanaPhonetics] = None) -> CharacterInfo:
    """Collect classification and conversion results for one character."""
    factory = factory or KanaFactory()
    kana_type = character.get_kana_type()

    base = counterpart = romaji = None
    if kana_type is not None:
        base = str(factory.to_variant(character, KanaVariant.NONE))
        other = factory.to_type(character, _OTHER_TYPE[kana_type])
        counterpart = str(other) if other else None
        if phonetics is not None:
            romaji = phonetics.to_romaji(character)

    return CharacterInfo(
        character=character.char,
        code_point=f"U+{character.code_point:04X}",
        is_kanji=character.is_kanji(),
        kana_type=kana_type,
        kana_variant=character.get_kana_variant(),
        base=base,
        counterpart=counterpart,
        romaji=romaji,
    )


def describe_text(text: str, with_romaji: bool = True) -> List[CharacterInfo]:
    """Describe every character of *text*, in order."""
    factory = KanaFactory()
    phonetics = KanaPhonetics() if with_romaji else None
    characters = CharacterTokenizer(wrap=True).tokenize(text)
    return [describe_character(c, factory, phonetics) for c in characters]
