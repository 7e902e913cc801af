"""Unicode ranges and fixed character tables for Japanese scripts."""

from typing import Tuple

# Inclusive (min, max) code point intervals
HIRAGANA_RANGE: Tuple[int, int] = (0x3041, 0x3096)
KATAKANA_RANGE: Tuple[int, int] = (0x30A1, 0x30FA)
KATAKANA_AINU_RANGE: Tuple[int, int] = (0x31F0, 0x31FF)
KATAKANA_HALF_RANGE: Tuple[int, int] = (0xFF65, 0xFF9F)
KANJI_RANGE: Tuple[int, int] = (0x4E01, 0x9FAF)
KANJI_RARE_RANGE: Tuple[int, int] = (0x3400, 0x4DB5)

# Positional syllabaries: the Nth hiragana corresponds to the Nth katakana
HIRAGANAS_CLASSIC = "あいうえおかきくけこさしすせそたちつてとなにぬねのはひふへほまみむめもやゆよらりるれろわをん"
HIRAGANAS_OLD = "ゐゑ"
KATAKANAS_CLASSIC = "アイウエオカキクケコサシスセソタチツテトナニヌネノハヒフヘホマミムメモヤユヨラリルレロワヲン"
KATAKANAS_OLD = "ヰヱ"

# Marked variants, aligned with the bases they derive from
HIRAGANAS_TENTEN = "ゔがぎぐげござじずぜぞだぢづでどばびぶべぼ"
HIRAGANAS_TENTEN_BASES = "うかきくけこさしすせそたちつてとはひふへほ"
KATAKANAS_TENTEN = "ヴガギグゲゴザジズゼゾダヂヅデドバビブベボヷヸヹヺ"
KATAKANAS_TENTEN_BASES = "ウカキクケコサシスセソタチツテトハヒフヘホワヰヱヲ"

HIRAGANAS_MARU = "ぱぴぷぺぽ"
HIRAGANAS_MARU_BASES = "はひふへほ"
KATAKANAS_MARU = "パピプペポ"
KATAKANAS_MARU_BASES = "ハヒフヘホ"

HIRAGANAS_SMALL = "ぁぃぅぇぉゕゖっゃゅょゎ"
HIRAGANAS_SMALL_BASES = "あいうえおかけつやゆよわ"
KATAKANAS_SMALL = "ァィゥェォヵヶッャュョヮ"
KATAKANAS_SMALL_BASES = "アイウエオカケツヤユヨワ"

# Base syllable spelling -> base hiragana
ROMAJI_TO_HIRAGANA = {
    "a": "あ", "i": "い", "u": "う", "e": "え", "o": "お",
    "ka": "か", "ki": "き", "ku": "く", "ke": "け", "ko": "こ",
    "sa": "さ", "shi": "し", "su": "す", "se": "せ", "so": "そ",
    "ta": "た", "chi": "ち", "tsu": "つ", "te": "て", "to": "と",
    "na": "な", "ni": "に", "nu": "ぬ", "ne": "ね", "no": "の",
    "ha": "は", "hi": "ひ", "fu": "ふ", "hu": "ふ", "he": "へ", "ho": "ほ",
    "ma": "ま", "mi": "み", "mu": "む", "me": "め", "mo": "も",
    "ya": "や", "yu": "ゆ", "yo": "よ",
    "ra": "ら", "ri": "り", "ru": "る", "re": "れ", "ro": "ろ",
    "wa": "わ", "wo": "を", "n": "ん",
    "wi": "ゐ", "we": "ゑ",
}


def in_range(code_point: int, bounds: Tuple[int, int]) -> bool:
    """Check whether *code_point* lies in the inclusive interval *bounds*."""
    low, high = bounds
    return low <= code_point <= high
