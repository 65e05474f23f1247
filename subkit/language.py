"""Subtitle languages and their names, plus charset conversion to UTF-8."""

from __future__ import annotations

import codecs
from enum import IntEnum

import chardet

# Keywords used in subtitle file names.
SUB_NAME_KEYWORD_CHINESE_SIMPLE = "chs"
SUB_NAME_KEYWORD_TRADITIONAL = "cht"

# Short Chinese descriptions of a subtitle's language.
MATCH_LANG_DOUBLE = "双语"
MATCH_LANG_CHS = "简"
MATCH_LANG_CHT = "繁"
MATCH_LANG_CHS_EN = "简英"
MATCH_LANG_CHT_EN = "繁英"
MATCH_LANG_EN = "英"
MATCH_LANG_JP = "日"
MATCH_LANG_CHS_JP = "简日"
MATCH_LANG_CHT_JP = "繁日"
MATCH_LANG_KR = "韩"
MATCH_LANG_CHS_KR = "简韩"
MATCH_LANG_CHT_KR = "繁韩"
MATCH_LANG_CHN_UNKNOWN = "未知语言"

# Older Emby style suffixes.
EMBY_UNKNOWN = ".unknow"
EMBY_CHS = ".chs"
EMBY_CHT = ".cht"
EMBY_CHS_EN = ".chs_en"
EMBY_CHT_EN = ".cht_en"
EMBY_EN = ".en"
EMBY_JP = ".jp"
EMBY_CHS_JP = ".chs_jp"
EMBY_CHT_JP = ".cht_jp"
EMBY_KR = ".kr"
EMBY_CHS_KR = ".chs_kr"
EMBY_CHT_KR = ".cht_kr"
EMBY_CHINESE = ".chinese"
EMBY_DEFAULT = ".default"

SUB_EXT_MARK_DEFAULT = ".default"
SUB_EXT_MARK_FORCED = ".forced"

# ISO 639 abbreviations for Chinese.
CHINESE_ABBR_639_1 = "zh"
CHINESE_ABBR_639_2T = "zho"
CHINESE_ABBR_639_2B = "chi"


class Language(IntEnum):
    """Language (or language pair) of a subtitle."""

    UNKNOWN = 0
    CHINESE_SIMPLE = 1
    CHINESE_TRADITIONAL = 2
    CHINESE_SIMPLE_ENGLISH = 3
    CHINESE_TRADITIONAL_ENGLISH = 4
    ENGLISH = 5
    JAPANESE = 6
    CHINESE_SIMPLE_JAPANESE = 7
    CHINESE_TRADITIONAL_JAPANESE = 8
    KOREAN = 9
    CHINESE_SIMPLE_KOREAN = 10
    CHINESE_TRADITIONAL_KOREAN = 11


_CHINESE_LANGS = frozenset(
    {
        Language.CHINESE_SIMPLE,
        Language.CHINESE_TRADITIONAL,
        Language.CHINESE_SIMPLE_ENGLISH,
        Language.CHINESE_TRADITIONAL_ENGLISH,
        Language.CHINESE_SIMPLE_JAPANESE,
        Language.CHINESE_TRADITIONAL_JAPANESE,
        Language.CHINESE_SIMPLE_KOREAN,
        Language.CHINESE_TRADITIONAL_KOREAN,
    }
)

_BILINGUAL_LANGS = _CHINESE_LANGS - {Language.CHINESE_SIMPLE, Language.CHINESE_TRADITIONAL}

_EMBY_OLD_NAMES: dict[Language, str] = {
    Language.UNKNOWN: EMBY_UNKNOWN,
    Language.CHINESE_SIMPLE: EMBY_CHS,
    Language.CHINESE_TRADITIONAL: EMBY_CHT,
    Language.CHINESE_SIMPLE_ENGLISH: EMBY_CHS_EN,
    Language.CHINESE_TRADITIONAL_ENGLISH: EMBY_CHT_EN,
    Language.ENGLISH: EMBY_EN,
    Language.JAPANESE: EMBY_JP,
    Language.CHINESE_SIMPLE_JAPANESE: EMBY_CHS_JP,
    Language.CHINESE_TRADITIONAL_JAPANESE: EMBY_CHT_JP,
    Language.KOREAN: EMBY_KR,
    Language.CHINESE_SIMPLE_KOREAN: EMBY_CHS_KR,
    Language.CHINESE_TRADITIONAL_KOREAN: EMBY_CHT_KR,
}

_CHINESE_STRINGS: dict[Language, str] = {
    Language.UNKNOWN: MATCH_LANG_CHN_UNKNOWN,
    Language.CHINESE_SIMPLE: MATCH_LANG_CHS,
    Language.CHINESE_TRADITIONAL: MATCH_LANG_CHT,
    Language.CHINESE_SIMPLE_ENGLISH: MATCH_LANG_CHS_EN,
    Language.CHINESE_TRADITIONAL_ENGLISH: MATCH_LANG_CHT_EN,
    Language.ENGLISH: MATCH_LANG_EN,
    Language.JAPANESE: MATCH_LANG_JP,
    Language.CHINESE_SIMPLE_JAPANESE: MATCH_LANG_CHS_JP,
    Language.CHINESE_TRADITIONAL_JAPANESE: MATCH_LANG_CHT_JP,
    Language.KOREAN: MATCH_LANG_KR,
    Language.CHINESE_SIMPLE_KOREAN: MATCH_LANG_CHS_KR,
    Language.CHINESE_TRADITIONAL_KOREAN: MATCH_LANG_CHT_KR,
}

_LANG_BY_CHINESE_STRING: dict[str, Language] = {v: k for k, v in _CHINESE_STRINGS.items()}

_SIMPLE_TO_TRADITIONAL: dict[Language, Language] = {
    Language.CHINESE_SIMPLE: Language.CHINESE_TRADITIONAL,
    Language.CHINESE_SIMPLE_ENGLISH: Language.CHINESE_TRADITIONAL_ENGLISH,
    Language.CHINESE_SIMPLE_JAPANESE: Language.CHINESE_TRADITIONAL_JAPANESE,
    Language.CHINESE_SIMPLE_KOREAN: Language.CHINESE_TRADITIONAL_KOREAN,
}

# Encodings that a detector reports for Chinese text, widened to a superset.
_ENCODING_WIDENING = {"gb2312": "gb18030", "gbk": "gb18030", "big5": "big5hkscs"}


def lang_converter(sub_lang: str) -> Language:
    """Map a site's language description (e.g. ``简体&英语``) to a Language."""
    if MATCH_LANG_DOUBLE in sub_lang:
        return Language.CHINESE_SIMPLE_ENGLISH
    if MATCH_LANG_CHS in sub_lang:
        if MATCH_LANG_EN in sub_lang:
            return Language.CHINESE_SIMPLE_ENGLISH
        if MATCH_LANG_JP in sub_lang:
            return Language.CHINESE_SIMPLE_JAPANESE
        if MATCH_LANG_KR in sub_lang:
            return Language.CHINESE_SIMPLE_KOREAN
        return Language.CHINESE_SIMPLE
    if MATCH_LANG_CHT in sub_lang:
        if MATCH_LANG_EN in sub_lang:
            return Language.CHINESE_TRADITIONAL_ENGLISH
        if MATCH_LANG_JP in sub_lang:
            return Language.CHINESE_TRADITIONAL_JAPANESE
        if MATCH_LANG_KR in sub_lang:
            return Language.CHINESE_TRADITIONAL_KOREAN
        return Language.CHINESE_TRADITIONAL
    if MATCH_LANG_EN in sub_lang:
        return Language.ENGLISH
    if MATCH_LANG_JP in sub_lang:
        return Language.JAPANESE
    if MATCH_LANG_KR in sub_lang:
        return Language.KOREAN
    return Language.UNKNOWN


def has_chinese_lang(lang: Language) -> bool:
    """True if the language includes Chinese."""
    return lang in _CHINESE_LANGS


def is_bilingual_subtitle(lang: Language) -> bool:
    """True for Chinese paired with another language."""
    return lang in _BILINGUAL_LANGS


def lang_to_emby_name_old(lang: Language) -> str:
    """Older Emby suffix for a language, e.g. ``.chs_en``."""
    return _EMBY_OLD_NAMES.get(lang, EMBY_UNKNOWN)


def lang_to_chinese_string(lang: Language) -> str:
    """Short Chinese description of a language, e.g. ``简英``."""
    return _CHINESE_STRINGS.get(lang, MATCH_LANG_CHN_UNKNOWN)


def chinese_iso_string_to_lang(chinese_str: str) -> Language:
    """Map ``zh``, ``zho`` or ``chi`` to simplified Chinese, anything else to unknown."""
    if chinese_str in (CHINESE_ABBR_639_1, CHINESE_ABBR_639_2T, CHINESE_ABBR_639_2B):
        return Language.CHINESE_SIMPLE
    return Language.UNKNOWN


def chinese_string_to_lang(chinese_str: str) -> Language:
    """Inverse of :func:`lang_to_chinese_string`; unknown strings give UNKNOWN."""
    return _LANG_BY_CHINESE_STRING.get(chinese_str, Language.UNKNOWN)


def is_chinese_simple_or_traditional(input_file_name: str, org_lang: Language) -> Language:
    """Refine simplified/traditional from keywords in a file name."""
    if SUB_NAME_KEYWORD_CHINESE_SIMPLE in input_file_name or MATCH_LANG_CHS in input_file_name:
        return org_lang
    if SUB_NAME_KEYWORD_TRADITIONAL in input_file_name or MATCH_LANG_CHT in input_file_name:
        return _SIMPLE_TO_TRADITIONAL.get(org_lang, org_lang)
    return org_lang


def change_file_coding_to_utf8(in_bytes: bytes) -> bytes:
    """Detect the encoding of ``in_bytes`` and return the text as UTF-8.

    Raises ``ValueError`` when the detected encoding is unknown or the bytes
    cannot be decoded with it.
    """
    detected = chardet.detect(in_bytes)
    encoding = detected.get("encoding")
    if not encoding:
        return in_bytes
    encoding = _ENCODING_WIDENING.get(encoding.lower(), encoding)
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ValueError(f"unsupported charset: {encoding}") from exc
    try:
        text = in_bytes.decode(encoding)
    except UnicodeDecodeError as exc:
        raise ValueError(f"cannot decode as {encoding}: {exc}") from exc
    if not text:
        return in_bytes
    return text.encode("utf-8")