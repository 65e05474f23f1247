import pytest

from subkit.decode import (
    CanNotFindEpAiredTime,
    CanNotFindImdbId,
    DecodeError,
    NoMetadataFile,
    VideoImdbInfo,
    get_imdb_info_for_movie,
    get_imdb_info_for_series_dir,
    get_imdb_info_for_series_episode,
    get_number_as_float,
    get_number_as_int,
    get_season_and_episode_from_sub_file_name,
)

MOVIE_XML = (
    "<?xml version='1.0' encoding='utf-8'?>"
    "<Title><LocalTitle>Army of the Dead</LocalTitle>"
    "<IMDB>tt0993840</IMDB><ProductionYear>2021</ProductionYear></Title>"
)

MOVIE_NFO = (
    "<?xml version='1.0' encoding='utf-8'?>"
    "<movie><title>Army of the Dead</title><imdbid>tt0993840</imdbid>"
    "<year>2021</year><premiered>2021-05-14</premiered></movie>"
)


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_movie_xml(tmp_path):
    folder = tmp_path / "Army of the Dead (2021)"
    folder.mkdir()
    _write(folder / "movie.xml", MOVIE_XML)
    video = _write(folder / "Army of the Dead (2021) WEBDL-1080p.mkv", "")
    info = get_imdb_info_for_movie(str(video))
    assert info.imdb_id == "tt0993840"
    assert info.year == "2021"


def test_movie_nfo(tmp_path):
    folder = tmp_path / "Army of the Dead (2021)"
    folder.mkdir()
    _write(folder / "Army of the Dead (2021) WEBDL-1080p.nfo", MOVIE_NFO)
    video = _write(folder / "Army of the Dead (2021) WEBDL-1080p.mkv", "")
    info = get_imdb_info_for_movie(str(video))
    assert info == VideoImdbInfo(
        imdb_id="tt0993840", title="Army of the Dead", year="2021", release_date="2021-05-14"
    )


def test_movie_name_nfo_preferred_over_movie_xml(tmp_path):
    _write(tmp_path / "movie.xml", MOVIE_XML.replace("tt0993840", "tt0000001"))
    _write(tmp_path / "movie one.nfo", MOVIE_NFO)
    video = _write(tmp_path / "movie one.mkv", "")
    assert get_imdb_info_for_movie(str(video)).imdb_id == "tt0993840"


def test_movie_xml_without_id_falls_back_to_nfo(tmp_path):
    _write(tmp_path / "a.nfo", MOVIE_NFO)
    _write(tmp_path / "movie.xml", "<Title><ProductionYear>2021</ProductionYear></Title>")
    video = _write(tmp_path / "Film.mkv", "")
    assert get_imdb_info_for_movie(str(video)).imdb_id == "tt0993840"


def test_movie_without_metadata(tmp_path):
    video = _write(tmp_path / "Film.mkv", "")
    with pytest.raises(NoMetadataFile):
        get_imdb_info_for_movie(str(video))


def test_nfo_without_imdb_id(tmp_path):
    _write(tmp_path / "Film.nfo", "<movie><title>x</title><year>2021</year></movie>")
    video = _write(tmp_path / "Film.mkv", "")
    with pytest.raises(CanNotFindImdbId):
        get_imdb_info_for_movie(str(video))


def test_broken_nfo_raises_decode_error(tmp_path):
    _write(tmp_path / "Film.nfo", "<movie><title>")
    video = _write(tmp_path / "Film.mkv", "")
    with pytest.raises(DecodeError):
        get_imdb_info_for_movie(str(video))


def test_series_uniqueid_overrides_imdbid(tmp_path):
    _write(
        tmp_path / "tvshow.nfo",
        "<tvshow><title>Loki</title><imdbid>tt0000001</imdbid>"
        "<uniqueid type='imdb'>tt9140554</uniqueid><year>2021</year></tvshow>",
    )
    info = get_imdb_info_for_series_dir(str(tmp_path))
    assert info.imdb_id == "tt9140554"
    assert info.title == "Loki"
    assert info.year == "2021"


def test_series_imdb_id_tag(tmp_path):
    _write(tmp_path / "tvshow.nfo", "<tvshow><imdb_id>tt9140554</imdb_id></tvshow>")
    assert get_imdb_info_for_series_dir(str(tmp_path)).imdb_id == "tt9140554"


def test_series_without_nfo(tmp_path):
    with pytest.raises(NoMetadataFile):
        get_imdb_info_for_series_dir(str(tmp_path))


def test_episode_premiered_overrides_aired(tmp_path):
    _write(
        tmp_path / "Loki - S01E01.nfo",
        "<episodedetails><aired>2021-06-08</aired><premiered>2021-06-09</premiered></episodedetails>",
    )
    video = _write(tmp_path / "Loki - S01E01.mkv", "")
    assert get_imdb_info_for_series_episode(str(video)).release_date == "2021-06-09"


def test_episode_without_aired(tmp_path):
    _write(tmp_path / "Loki - S01E01.nfo", "<episodedetails><title>x</title></episodedetails>")
    video = _write(tmp_path / "Loki - S01E01.mkv", "")
    with pytest.raises(CanNotFindEpAiredTime):
        get_imdb_info_for_series_episode(str(video))


def test_season_pack_from_file_name():
    name = (
        "杀死伊芙 第二季(-简繁英双语字幕-FIX字幕侠)Killing.Eve.S02.Do.You.Know.How.to."
        "Dispose.of.a.Body.1080p.AMZN.WEB-DL.DDP5.1.H.264-NTb.rar"
    )
    assert get_season_and_episode_from_sub_file_name(name) == (True, 2, 0)


def test_episode_from_file_name():
    name = (
        "杀死伊芙 第二季(第1集-简繁英双语字幕-FIX字幕侠)Killing.Eve.S02E01.Do.You.Know.How.to."
        "Dispose.of.a.Body.1080p.AMZN.WEB-DL.DDP5.1.H.264-NTb.rar"
    )
    assert get_season_and_episode_from_sub_file_name(name) == (False, 2, 1)


def test_no_season_in_file_name():
    assert get_season_and_episode_from_sub_file_name("movie.2021.mkv") == (False, 0, 0)


def test_get_number_as_float():
    assert get_number_as_float("asd&^%1998.2jh aweo ") == pytest.approx(1998.2)


def test_get_number_as_int():
    assert get_number_as_int("asd&^%1998jh aweo ") == 1998


def test_get_number_negative():
    assert get_number_as_int("x-12y") == -12


def test_get_number_not_found():
    with pytest.raises(ValueError):
        get_number_as_float("no digits")
    with pytest.raises(ValueError):
        get_number_as_int("no digits")


def test_get_number_as_int_rejects_decimal():
    with pytest.raises(ValueError):
        get_number_as_int("1998.2")