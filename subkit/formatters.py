"""Subtitle file naming formats: Emby style, plain ISO style and the legacy style."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import IntEnum
import re
from typing import Protocol

from subkit.language import (
    CHINESE_ABBR_639_1,
    EMBY_CHINESE,
    EMBY_CHS,
    EMBY_CHS_EN,
    EMBY_CHS_JP,
    EMBY_CHS_KR,
    EMBY_CHT,
    EMBY_CHT_EN,
    EMBY_CHT_JP,
    EMBY_CHT_KR,
    EMBY_DEFAULT,
    MATCH_LANG_CHS,
    MATCH_LANG_CHS_EN,
    MATCH_LANG_CHS_JP,
    MATCH_LANG_CHS_KR,
    MATCH_LANG_CHT,
    MATCH_LANG_CHT_EN,
    MATCH_LANG_CHT_JP,
    MATCH_LANG_CHT_KR,
    SUB_EXT_MARK_DEFAULT,
    SUB_EXT_MARK_FORCED,
    Language,
    chinese_string_to_lang,
    lang_to_chinese_string,
)
from subkit.parser_hub import SubFileInfo

FORMATTER_NAME_STRING_NORMAL = "normal formatter"
FORMATTER_NAME_STRING_EMBY = "emby formatter"
NO_MATCH_FORMATTER = "No Match formatter"

SUB_SITE_ZIMUKU = "zimuku"
SUB_SITE_SUBHD = "subhd"
SUB_SITE_SHOOTER = "shooter"
SUB_SITE_XUNLEI = "xunlei"
_KNOWN_SITES = frozenset({SUB_SITE_ZIMUKU, SUB_SITE_SUBHD, SUB_SITE_SHOOTER, SUB_SITE_XUNLEI})

_EMBY_RE = re.compile(r"(?m).chinese\((\S+)\)(\.\S+)")
_NORMAL_RE = re.compile(r"(?m)\.(\bzh\b|\bzho\b|\bchi\b)(\.\S+)", re.ASCII)

_log = logging.getLogger(__name__)


class FormatterName(IntEnum):
    """Known subtitle naming formats."""

    EMBY = 0  # xxx.chinese(简,shooter).ass
    NORMAL = 1  # xxx.zh.ass

    def __str__(self) -> str:
        if self is FormatterName.NORMAL:
            return FORMATTER_NAME_STRING_NORMAL
        if self is FormatterName.EMBY:
            return FORMATTER_NAME_STRING_EMBY
        return NO_MATCH_FORMATTER


@dataclass(frozen=True)
class SubNameMatch:
    """The parts of a subtitle file name that matched a naming format."""

    file_name_without_ext: str
    sub_ext: str
    sub_lang: Language
    extra_sub_pre_name: str


class _FileTypeDetector(Protocol):
    def determine_file_type_from_file(self, file_path: str) -> SubFileInfo | None: ...


def _ext(path: str) -> str:
    base = re.split(r"[\\/]", path)[-1] if os.sep == "\\" else path.rsplit("/", 1)[-1]
    idx = base.rfind(".")
    return base[idx:] if idx >= 0 else ""


def _name_without_ext(video_file_name: str) -> str:
    return os.path.basename(video_file_name).replace(_ext(video_file_name), "")


class EmbyFormatter:
    """Names like ``xxx.chinese(简英,subhd).ass``."""

    name = FORMATTER_NAME_STRING_EMBY
    formatter_name = FormatterName.EMBY

    def is_match_this_format(self, sub_name: str) -> SubNameMatch | None:
        """Split an Emby style subtitle name into its parts, or return None."""
        match = _EMBY_RE.search(sub_name)
        if match is None:
            return None
        mid = match.group(1)
        if "," in mid:
            parts = mid.split(",")
            lang_str, extra = parts[0], parts[1]
        else:
            lang_str, extra = mid, ""
        return SubNameMatch(
            file_name_without_ext=sub_name.replace(match.group(0), ""),
            sub_ext=match.group(2),
            sub_lang=chinese_string_to_lang(lang_str),
            extra_sub_pre_name=extra,
        )

    def generate_mix_sub_name(
        self, video_file_name: str, sub_ext: str, sub_lang: Language, extra_sub_pre_name: str
    ) -> tuple[str, str, str]:
        """Plain, ``.default`` and ``.forced`` subtitle names for a video file."""
        return self.generate_mix_sub_name_base(
            _name_without_ext(video_file_name), sub_ext, sub_lang, extra_sub_pre_name
        )

    def generate_mix_sub_name_base(
        self, file_name_without_ext: str, sub_ext: str, sub_lang: Language, extra_sub_pre_name: str
    ) -> tuple[str, str, str]:
        """Plain, ``.default`` and ``.forced`` names from a name without extension."""
        note = f",{extra_sub_pre_name}" if extra_sub_pre_name else ""
        stem = f"{file_name_without_ext}{EMBY_CHINESE}({lang_to_chinese_string(sub_lang)}{note})"
        return (
            stem + sub_ext,
            stem + SUB_EXT_MARK_DEFAULT + sub_ext,
            stem + SUB_EXT_MARK_FORCED + sub_ext,
        )


class NormalFormatter:
    """Names like ``xxx.zh.ass``; the language is read from the subtitle content."""

    name = FORMATTER_NAME_STRING_NORMAL
    formatter_name = FormatterName.NORMAL

    def __init__(self, sub_parser: _FileTypeDetector) -> None:
        self.sub_parser = sub_parser

    def is_match_this_format(self, sub_name: str) -> SubNameMatch | None:
        """Split a ``.zh``/``.zho``/``.chi`` subtitle name into its parts, or return None."""
        match = _NORMAL_RE.search(sub_name)
        if match is None:
            return None
        try:
            info = self.sub_parser.determine_file_type_from_file(sub_name)
        except Exception as exc:  # an unreadable subtitle simply does not match
            _log.error("normal formatter cannot parse %s: %s", sub_name, exc)
            return None
        if info is None:
            return None
        return SubNameMatch(
            file_name_without_ext=sub_name.replace(match.group(0), ""),
            sub_ext=match.group(2),
            sub_lang=info.lang,
            extra_sub_pre_name="",
        )

    def generate_mix_sub_name(
        self, video_file_name: str, sub_ext: str, sub_lang: Language, extra_sub_pre_name: str
    ) -> tuple[str, str, str]:
        """Plain, ``.default`` and ``.forced`` subtitle names for a video file."""
        return self.generate_mix_sub_name_base(
            _name_without_ext(video_file_name), sub_ext, sub_lang, extra_sub_pre_name
        )

    def generate_mix_sub_name_base(
        self, file_name_without_ext: str, sub_ext: str, sub_lang: Language, extra_sub_pre_name: str
    ) -> tuple[str, str, str]:
        """Plain, ``.default`` and ``.forced`` names; language and site are not encoded."""
        stem = f"{file_name_without_ext}.{CHINESE_ABBR_639_1}"
        return (
            stem + sub_ext,
            stem + SUB_EXT_MARK_DEFAULT + sub_ext,
            stem + SUB_EXT_MARK_FORCED + sub_ext,
        )


# Legacy suffix -> (language description, whether the single-sub form was default).
_OLD_SUFFIXES: dict[str, tuple[str, bool]] = {
    EMBY_CHS: (MATCH_LANG_CHS, True),
    EMBY_CHT: (MATCH_LANG_CHT, False),
    EMBY_CHS_EN: (MATCH_LANG_CHS_EN, True),
    EMBY_CHT_EN: (MATCH_LANG_CHT_EN, False),
    EMBY_CHS_JP: (MATCH_LANG_CHS_JP, True),
    EMBY_CHT_JP: (MATCH_LANG_CHT_JP, False),
    EMBY_CHS_KR: (MATCH_LANG_CHS_KR, True),
    EMBY_CHT_KR: (MATCH_LANG_CHT_KR, False),
}


def _make_mix_sub_ext_string(
    org_file_name_without_ext: str, lang: str, ext: str, site: str, be_default: bool
) -> str:
    default = EMBY_DEFAULT if be_default else ""
    inner = f"{lang},{site}" if site else lang
    return f"{org_file_name_without_ext}{EMBY_CHINESE}({inner}){default}{ext}"


def is_old_version_sub_prefix_name(sub_file_name: str) -> tuple[str, str] | None:
    """Recognise a legacy name such as ``x.chs_en[shooter].ass``.

    Returns the matched mixed suffix (``.chs_en[shooter].ass``) and the new
    Emby style file name, or None when the name is not in the legacy format.
    """
    sub_type_ext = _ext(sub_file_name)
    without_ext = sub_file_name.replace(sub_type_ext, "")
    now_ext = _ext(without_ext)
    org_mix_ext = now_ext + sub_type_ext
    org_name = sub_file_name.replace(org_mix_ext, "")

    single = _OLD_SUFFIXES.get(now_ext)
    if single is not None:
        lang, be_default = single
        return org_mix_ext, _make_mix_sub_ext_string(org_name, lang, sub_type_ext, "", be_default)

    parts = now_ext.split("[")
    if len(parts) != 2:
        return None
    multi = _OLD_SUFFIXES.get(parts[0])
    site = parts[1].replace("]", "")
    if multi is None or site not in _KNOWN_SITES:
        return None
    return org_mix_ext, _make_mix_sub_ext_string(org_name, multi[0], sub_type_ext, site, False)


def get_sub_formatter(
    formatter_name: int, sub_parser: _FileTypeDetector | None = None
) -> EmbyFormatter | NormalFormatter:
    """Return the formatter for a format number; unknown numbers give the Emby one.

    The normal formatter needs ``sub_parser``; ValueError is raised without it.
    """
    if formatter_name == FormatterName.NORMAL:
        if sub_parser is None:
            raise ValueError("the normal formatter needs a subtitle parser")
        return NormalFormatter(sub_parser)
    return EmbyFormatter()