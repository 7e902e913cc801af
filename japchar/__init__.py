import os
from dotenv import load_dotenv

load_dotenv()

# Logging level for the package logger (DEBUG, INFO, WARNING, ...)
LOG_LEVEL = os.getenv("JAPCHAR_LOG_LEVEL", "INFO").upper()

# Script used by the command line when --type is not given
DEFAULT_KANA_TYPE = os.getenv("JAPCHAR_DEFAULT_TYPE", "hiragana").lower()

from japchar.base import InvalidArgumentError, NullOrEmptyError
from japchar.character import JapaneseCharacter, KanaType, KanaVariant
from japchar.factory import KanaFactory
from japchar.tokenizer import CharacterTokenizer, split_text

__all__ = [
    'InvalidArgumentError',
    'NullOrEmptyError',
    'JapaneseCharacter',
    'KanaType',
    'KanaVariant',
    'KanaFactory',
    'CharacterTokenizer',
    'split_text',
]
