"""Test configuration and fixtures."""
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from japchar.character import JapaneseCharacter
from japchar.factory import KanaFactory
from japchar.unicode import HIRAGANA_RANGE, KATAKANA_RANGE

@pytest.fixture
def factory():
    """Kana factory under test."""
    return KanaFactory()

@pytest.fixture
def all_hiraganas():
    """Every character of the hiragana range."""
    low, high = HIRAGANA_RANGE
    return [JapaneseCharacter(chr(code)) for code in range(low, high + 1)]

@pytest.fixture
def all_katakanas():
    """Every character of the katakana range."""
    low, high = KATAKANA_RANGE
    return [JapaneseCharacter(chr(code)) for code in range(low, high + 1)]

@pytest.fixture
def non_kana_samples():
    """Characters outside both kana ranges, including neighbours of the ranges."""
    samples = "aZ0 !\u3001\u3002\u30fc\u309b\u309c\u3099\u309a\u309f\u30a0\u30ff\u30fb\u4e00\u4eba\u6f22\u31f0\uff71\u3040\u3097\u3400\uffff"
    return [JapaneseCharacter(c) for c in samples]
