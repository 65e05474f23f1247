"""Pick the best Chinese subtitle and manage subtitle files on disk."""

from __future__ import annotations

import os
import re
import shutil
from typing import Iterable

from subkit.language import (
    SUB_EXT_MARK_DEFAULT,
    SUB_EXT_MARK_FORCED,
    has_chinese_lang,
    is_bilingual_subtitle,
)
from subkit.parser_hub import SUB_EXT_ASS, SUB_EXT_SRT, SUB_EXT_SSA, SubFileInfo, is_sub_ext_wanted

MIN_SUB_FILE_SIZE = 1000

_ONE_SEASON_SUB_FOLDER_RE = re.compile(r"^Sub_S\dE0", re.MULTILINE | re.ASCII)


def _ext(name: str) -> str:
    base = re.split(r"[\\/]", name)[-1]
    idx = base.rfind(".")
    return base[idx:] if idx >= 0 else ""


def _ext_fits_priority(info: SubFileInfo, sub_type_priority: int) -> bool:
    ext = info.ext.lower()
    if sub_type_priority == 1:
        return ext == SUB_EXT_SRT
    if sub_type_priority == 2:
        return ext in (SUB_EXT_ASS, SUB_EXT_SSA)
    return True


def select_chinese_best_bilingual_subtitle(
    subs: Iterable[SubFileInfo], sub_type_priority: int
) -> SubFileInfo | None:
    """First bilingual Chinese subtitle of the wanted type, or None.

    ``sub_type_priority``: 0 any type, 1 srt only, 2 ass/ssa only.
    """
    for info in subs:
        if (
            has_chinese_lang(info.lang)
            and _ext_fits_priority(info, sub_type_priority)
            and is_bilingual_subtitle(info.lang)
        ):
            return info
    return None


def select_chinese_best_subtitle(
    subs: Iterable[SubFileInfo], sub_type_priority: int
) -> SubFileInfo | None:
    """First Chinese subtitle of the wanted type, or None.

    ``sub_type_priority``: 0 any type, 1 srt only, 2 ass/ssa only.
    """
    for info in subs:
        if has_chinese_lang(info.lang) and _ext_fits_priority(info, sub_type_priority):
            return info
    return None


def add_front_name(from_where: str, top_n: int, org_name: str) -> str:
    """Prefix a file name with the site it came from and its rank there."""
    return f"[{from_where}]_{top_n}_{org_name}"


def _sorted_entries(directory: str) -> list[os.DirEntry]:
    with os.scandir(directory) as entries:
        return sorted(entries, key=lambda entry: entry.name)


def search_matched_sub_file(directory: str | os.PathLike) -> list[str]:
    """Recursively list subtitle files of at least 1000 bytes.

    Whole-season cache folders (``Sub_S1E0`` and the like) are skipped, and
    errors inside sub-folders are ignored; a missing top folder raises OSError.
    """
    directory = os.fspath(directory)
    found: list[str] = []
    for entry in _sorted_entries(directory):
        full_path = directory + os.sep + entry.name
        if entry.is_dir():
            if _ONE_SEASON_SUB_FOLDER_RE.search(entry.name):
                continue
            try:
                found.extend(search_matched_sub_file(full_path))
            except OSError:
                continue
        else:
            if entry.stat().st_size < MIN_SUB_FILE_SIZE:
                continue
            if is_sub_ext_wanted(entry.name):
                found.append(full_path)
    return found


def search_video_match_sub_file_and_remove_ext_mark(video_full_path: str | os.PathLike) -> None:
    """Strip ``.default`` or ``.forced`` from the subtitles that belong to a video.

    Only one of the two marks is removed from each file name.
    """
    video_full_path = os.fspath(video_full_path)
    directory = os.path.dirname(video_full_path)
    file_name = os.path.basename(video_full_path).lower()
    file_name = file_name.replace(_ext(file_name), "")
    for entry in _sorted_entries(directory):
        if entry.is_dir():
            continue
        if entry.stat().st_size < MIN_SUB_FILE_SIZE:
            continue
        now_file_name = entry.name.lower()
        if not is_sub_ext_wanted(now_file_name):
            continue
        if file_name not in now_file_name:
            continue
        for mark in (SUB_EXT_MARK_DEFAULT, SUB_EXT_MARK_FORCED):
            if mark + "." in now_file_name:
                old_path = directory + os.sep + entry.name
                new_path = directory + os.sep + entry.name.replace(mark + ".", ".")
                os.rename(old_path, new_path)
                break


def delete_one_season_sub_cache_folder(series_dir: str | os.PathLike) -> None:
    """Remove every whole-season subtitle cache folder inside a series folder."""
    series_dir = os.fspath(series_dir)
    for entry in _sorted_entries(series_dir):
        if entry.is_dir() and _ONE_SEASON_SUB_FOLDER_RE.search(entry.name):
            shutil.rmtree(series_dir + os.sep + entry.name)