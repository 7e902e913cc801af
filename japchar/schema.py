from pydantic import BaseModel, Field
from typing import Optional

from japchar.character import KanaType, KanaVariant

class CharacterInfo(BaseModel):
    character: str = Field(..., min_length=1, max_length=1)
    code_point: str = Field(..., pattern=r"^U\+[0-9A-F]{4,6}$")
    is_kanji: bool
    kana_type: Optional[KanaType] = None
    kana_variant: Optional[KanaVariant] = None
    base: Optional[str] = None         # NONE-variant form of a kana
    counterpart: Optional[str] = None  # same kana in the other script, if any
    romaji: Optional[str] = None       # Hepburn reading, kana only
