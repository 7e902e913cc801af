#!/usr/bin/env python3
import argparse
import json
import sys
from typing import List, Optional

from japchar import DEFAULT_KANA_TYPE
from japchar.base import InvalidArgumentError
from japchar.character import JapaneseCharacter, KanaType, KanaVariant
from japchar.factory import KanaFactory
from japchar.logger import logger
from japchar.report import describe_text

TYPE_CHOICES = [t.value for t in KanaType]
VARIANT_CHOICES = [v.value for v in KanaVariant]


def cmd_describe(args) -> int:
    infos = describe_text(args.text, with_romaji=not args.no_romaji)
    if args.json:
        print(json.dumps([info.model_dump(mode="json") for info in infos], ensure_ascii=False, indent=2))
        return 0

    for info in infos:
        kind = "kanji" if info.is_kanji else "other"
        if info.kana_type:
            kind = f"{info.kana_type.value}/{info.kana_variant.value}"
        extra = ""
        if info.base and info.base != info.character:
            extra += f" base={info.base}"
        if info.counterpart:
            extra += f" counterpart={info.counterpart}"
        if info.romaji:
            extra += f" romaji={info.romaji}"
        print(f"{info.character}\t{info.code_point}\t{kind}{extra}")
    logger.debug(f"Described {len(infos)} characters")
    return 0


def cmd_romaji(args) -> int:
    kana_type = KanaType(args.type)
    try:
        kana = KanaFactory().from_romaji(args.token, kana_type)
    except InvalidArgumentError as e:
        logger.error(f"❌ {e}")
        return 1
    print(kana)
    return 0


def cmd_convert(args) -> int:
    try:
        character = JapaneseCharacter(args.char)
    except InvalidArgumentError as e:
        logger.error(f"❌ {e}")
        return 1

    factory = KanaFactory()
    if args.variant is None:
        result = factory.to_type(character, KanaType(args.type))
    else:
        result = factory.transform(character, KanaType(args.type), KanaVariant(args.variant))

    if result is None:
        logger.error(f"❌ No {args.type} {args.variant or ''} form for '{character}'")
        return 1
    print(result)
    return 0


def default_kana_type() -> str:
    """Return the configured default script, or hiragana if it is not a known one."""
    if DEFAULT_KANA_TYPE in TYPE_CHOICES:
        return DEFAULT_KANA_TYPE
    logger.warning(f"⚠️ Unknown JAPCHAR_DEFAULT_TYPE '{DEFAULT_KANA_TYPE}', using {KanaType.HIRAGANA.value}")
    return KanaType.HIRAGANA.value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Classify and convert Japanese kana and kanji characters"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    default_type = default_kana_type()

    describe = subparsers.add_parser("describe", help="Describe every character of a text")
    describe.add_argument("text", help="Text to describe")
    describe.add_argument("--json", action="store_true", help="Print a JSON array instead of lines")
    describe.add_argument("--no-romaji", action="store_true", help="Skip Hepburn readings")
    describe.set_defaults(func=cmd_describe)

    romaji = subparsers.add_parser("romaji", help="Build a kana from a single romaji syllable")
    romaji.add_argument("token", help="Romaji syllable, e.g. 'shi', 'po' or '+tsu' for a small kana")
    romaji.add_argument("--type", choices=TYPE_CHOICES, default=default_type, help="Script of the result")
    romaji.set_defaults(func=cmd_romaji)

    convert = subparsers.add_parser("convert", help="Convert a kana to another script and/or variant")
    convert.add_argument("char", help="Kana to convert")
    convert.add_argument("--type", choices=TYPE_CHOICES, default=default_type, help="Target script")
    convert.add_argument("--variant", choices=VARIANT_CHOICES, default=None,
                         help="Target variant (keeps the current one if omitted)")
    convert.set_defaults(func=cmd_convert)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
