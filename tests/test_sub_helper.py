import os
from pathlib import Path

import pytest

from subkit.language import Language
from subkit.parser_hub import SubFileInfo
from subkit.sub_helper import (
    add_front_name,
    delete_one_season_sub_cache_folder,
    search_matched_sub_file,
    search_video_match_sub_file_and_remove_ext_mark,
    select_chinese_best_bilingual_subtitle,
    select_chinese_best_subtitle,
)

BIG = b"x" * 1200


def _write(path: Path, data: bytes = BIG) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


def test_delete_one_season_sub_cache_folder(tmp_path):
    (tmp_path / "Sub_S1E0").mkdir()
    _write(tmp_path / "Sub_S1E0" / "a.ass")
    (tmp_path / "Season 1").mkdir()
    delete_one_season_sub_cache_folder(tmp_path)
    assert not (tmp_path / "Sub_S1E0").exists()
    assert (tmp_path / "Season 1").is_dir()


def test_delete_one_season_missing_dir_raises(tmp_path):
    with pytest.raises(OSError):
        delete_one_season_sub_cache_folder(tmp_path / "nope")


def test_search_matched_sub_file(tmp_path):
    _write(tmp_path / "a.ass")
    _write(tmp_path / "b.SRT")
    _write(tmp_path / "small.srt", b"tiny")
    _write(tmp_path / "video.mkv")
    _write(tmp_path / "Season 1" / "c.ssa")
    _write(tmp_path / "Sub_S1E0" / "d.ass")
    found = search_matched_sub_file(tmp_path)
    names = sorted(os.path.basename(p) for p in found)
    assert names == ["a.ass", "b.SRT", "c.ssa"]
    assert str(tmp_path) + os.sep + "a.ass" in found


def test_search_matched_sub_file_missing_dir(tmp_path):
    with pytest.raises(OSError):
        search_matched_sub_file(tmp_path / "missing")


def test_remove_ext_mark(tmp_path):
    video = tmp_path / "Movie.mkv"
    _write(video)
    _write(tmp_path / "Movie.chinese(简英).default.ass")
    _write(tmp_path / "Movie.zh.forced.srt")
    _write(tmp_path / "Other.zh.default.srt")
    _write(tmp_path / "Movie.small.default.ass", b"tiny")
    search_video_match_sub_file_and_remove_ext_mark(video)
    found = search_matched_sub_file(tmp_path)
    assert sorted(os.path.basename(p) for p in found) == [
        "Movie.chinese(简英).ass",
        "Movie.zh.srt",
        "Other.zh.default.srt",
    ]
    assert (tmp_path / "Movie.small.default.ass").is_file()


def test_remove_ext_mark_missing_dir(tmp_path):
    with pytest.raises(OSError):
        search_video_match_sub_file_and_remove_ext_mark(tmp_path / "gone" / "Movie.mkv")


def test_add_front_name():
    assert add_front_name("zimuku", 3, "x.ass") == "[zimuku]_3_x.ass"


def _subs():
    return [
        SubFileInfo(name="en.srt", ext=".srt", lang=Language.ENGLISH),
        SubFileInfo(name="chs.ass", ext=".ass", lang=Language.CHINESE_SIMPLE),
        SubFileInfo(name="chs_en.srt", ext=".SRT", lang=Language.CHINESE_SIMPLE_ENGLISH),
        SubFileInfo(name="cht_en.ass", ext=".ass", lang=Language.CHINESE_TRADITIONAL_ENGLISH),
    ]


@pytest.mark.parametrize(
    "priority, expected",
    [(0, "chs_en.srt"), (1, "chs_en.srt"), (2, "cht_en.ass")],
)
def test_select_bilingual(priority, expected):
    assert select_chinese_best_bilingual_subtitle(_subs(), priority).name == expected


@pytest.mark.parametrize(
    "priority, expected",
    [(0, "chs.ass"), (1, "chs_en.srt"), (2, "chs.ass")],
)
def test_select_best(priority, expected):
    assert select_chinese_best_subtitle(_subs(), priority).name == expected


def test_select_none_when_no_chinese():
    subs = [SubFileInfo(name="en.srt", ext=".srt", lang=Language.ENGLISH)]
    assert select_chinese_best_subtitle(subs, 0) is None
    assert select_chinese_best_bilingual_subtitle(subs, 0) is None