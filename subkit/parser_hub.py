"""Dispatch subtitle files to a chain of parsers and check subtitle extensions."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from typing import Protocol

from subkit.language import Language, has_chinese_lang

SUB_EXT_ASS = ".ass"
SUB_EXT_SSA = ".ssa"
SUB_EXT_SRT = ".srt"
SUB_TYPE_ASS = "ass"
SUB_TYPE_SSA = "ssa"
SUB_TYPE_SRT = "srt"

_SITE_PREFIX_RE = re.compile(r"^\[(\w+)\]_", re.ASCII)

_log = logging.getLogger(__name__)


@dataclass
class SubFileInfo:
    """What a parser found out about one subtitle file."""

    name: str = ""
    ext: str = ""
    lang: Language = Language.UNKNOWN
    file_full_path: str = ""
    from_where_site: str = ""
    data: bytes = b""
    ch_lines: list[str] = field(default_factory=list)
    other_lines: list[str] = field(default_factory=list)


class SubParser(Protocol):
    """A parser for one subtitle format; returns None when the input is not its format."""

    def determine_file_type_from_file(self, file_path: str) -> SubFileInfo | None: ...

    def determine_file_type_from_bytes(self, in_bytes: bytes, now_ext: str) -> SubFileInfo | None: ...


def _go_ext(path: str) -> str:
    base = re.split(r"[\\/]", path)[-1]
    idx = base.rfind(".")
    return base[idx:] if idx >= 0 else ""


class SubParserHub:
    """Tries each parser in turn; the first one that recognises the input wins."""

    def __init__(self, parser: SubParser, *args: SubParser) -> None:
        self.parsers: list[SubParser] = [parser, *args]

    def determine_file_type_from_file(self, file_path: str) -> SubFileInfo | None:
        """Parse a subtitle file, or return None if no parser knows its format."""
        for parser in self.parsers:
            info = parser.determine_file_type_from_file(file_path)
            if info is None:
                continue
            info.name = os.path.basename(file_path)
            info.file_full_path = file_path
            info.from_where_site = _from_where_site(file_path)
            return info
        return None

    def determine_file_type_from_bytes(self, in_bytes: bytes, now_ext: str) -> SubFileInfo | None:
        """Parse subtitle content, or return None if no parser knows its format."""
        for parser in self.parsers:
            info = parser.determine_file_type_from_bytes(in_bytes, now_ext)
            if info is not None:
                return info
        return None

    def is_sub_has_chinese(self, file_path: str) -> bool:
        """True if the subtitle file parses and its language includes Chinese."""
        try:
            info = self.determine_file_type_from_file(file_path)
        except Exception as exc:  # any parser failure means "not usable"
            _log.error("is_sub_has_chinese %s %s", file_path, exc)
            return False
        if info is None:
            _log.warning("is_sub_has_chinese %s not support sub type", file_path)
            return False
        if not has_chinese_lang(info.lang):
            _log.warning("is_sub_has_chinese %s not chinese sub, is %s", file_path, info.lang.name)
            return False
        return True


def _from_where_site(file_path: str) -> str:
    match = _SITE_PREFIX_RE.search(os.path.basename(file_path))
    return match.group(1) if match else ""


def is_sub_type_wanted(sub_name: str) -> bool:
    """True if the name contains ``ass``, ``ssa`` or ``srt`` anywhere."""
    lower = sub_name.lower()
    return any(kind in lower for kind in (SUB_TYPE_ASS, SUB_TYPE_SSA, SUB_TYPE_SRT))


def is_sub_ext_wanted(sub_name: str) -> bool:
    """True if the name's extension is ``.ass``, ``.ssa`` or ``.srt`` (any case)."""
    return _go_ext(sub_name).lower() in (SUB_EXT_SSA, SUB_EXT_ASS, SUB_EXT_SRT)