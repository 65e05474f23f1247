"""Read IMDB ids, years and air dates from media metadata, and numbers from names."""

from __future__ import annotations

import logging
import os
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass

METADATA_MOVIE_XML = "movie.xml"
METADATA_TV_NFO = "tvshow.nfo"
SUFFIX_NAME_XML = ".xml"
SUFFIX_NAME_NFO = ".nfo"

_NUMBER_RE = re.compile(r"(?:\-)?\d{1,}(?:\.\d{1,})?", re.ASCII)
_EPISODE_RE = re.compile(r"\.S(\d+)E(\d+)\.", re.ASCII)
_SEASON_RE = re.compile(r"\.S(\d+)\.", re.ASCII)

_log = logging.getLogger(__name__)


class DecodeError(Exception):
    """Base error for metadata decoding."""


class CanNotFindImdbId(DecodeError):
    """The metadata file holds no IMDB id."""


class NoMetadataFile(DecodeError):
    """No metadata file was found next to the video."""


class CanNotFindEpAiredTime(DecodeError):
    """The episode metadata holds no air date."""


@dataclass
class VideoImdbInfo:
    """What a metadata file says about a video."""

    imdb_id: str = ""
    title: str = ""
    year: str = ""
    release_date: str = ""


def _go_ext(path: str) -> str:
    base = re.split(r"[\\/]", path)[-1] if os.sep == "\\" else path.rsplit("/", 1)[-1]
    idx = base.rfind(".")
    return base[idx:] if idx >= 0 else ""


def _parse_xml(file_path: str) -> ET.Element:
    try:
        return ET.parse(file_path).getroot()
    except ET.ParseError as exc:
        raise DecodeError(f"cannot parse {file_path}: {exc}") from exc


def _child_text(root: ET.Element, root_key: str, child: str) -> str | None:
    if root.tag != root_key:
        return None
    element = root.find(child)
    if element is None:
        return None
    return element.text or ""


def _first_descendant_text(root: ET.Element, tag: str, type_attr: str | None = None) -> str | None:
    for element in root.iter(tag):
        if type_attr is None or element.get("type") == type_attr:
            return element.text or ""
    return None


def _imdb_and_year_movie_xml(movie_file_path: str) -> VideoImdbInfo:
    root = _parse_xml(movie_file_path)
    info = VideoImdbInfo()
    imdb = _first_descendant_text(root, "IMDB")
    if imdb is not None:
        info.imdb_id = imdb
    year = _first_descendant_text(root, "ProductionYear")
    if year is not None:
        info.year = year
    if not info.imdb_id:
        raise CanNotFindImdbId(f"no IMDB id in {movie_file_path}")
    return info


def _imdb_and_year_nfo(nfo_file_path: str, root_key: str) -> VideoImdbInfo:
    root = _parse_xml(nfo_file_path)
    info = VideoImdbInfo()

    title = _child_text(root, root_key, "title")
    if title is not None:
        info.title = title

    # Later sources override earlier ones.
    imdb_candidates = (
        _child_text(root, root_key, "imdbid"),
        _child_text(root, root_key, "imdb_id"),
        _first_descendant_text(root, "uniqueid", "imdb"),
        _first_descendant_text(root, "uniqueid", "Imdb"),
        _first_descendant_text(root, "uniqueid", "IMDB"),
    )
    for candidate in imdb_candidates:
        if candidate is not None:
            info.imdb_id = candidate

    year = _child_text(root, root_key, "year")
    if year is not None:
        info.year = year

    for tag in ("releasedate", "premiered"):
        value = _child_text(root, root_key, tag)
        if value is not None:
            info.release_date = value

    if not info.imdb_id:
        raise CanNotFindImdbId(f"no IMDB id in {nfo_file_path}")
    return info


def _sorted_files(directory: str) -> list[str]:
    with os.scandir(directory) as entries:
        return sorted(entry.name for entry in entries if not entry.is_dir())


def get_imdb_info_for_movie(movie_file_full_path: str) -> VideoImdbInfo:
    """Find and read the metadata of a movie file.

    A ``<movie name>.nfo`` is preferred, then ``movie.xml``, then any ``*.nfo``.
    """
    dir_path = os.path.dirname(movie_file_full_path)
    base_name = os.path.basename(movie_file_full_path)
    movie_nfo_file_name = base_name.replace(_go_ext(movie_file_full_path), SUFFIX_NAME_NFO)

    movie_xml_path = ""
    movie_name_nfo_path = ""
    nfo_file_path = ""
    for name in _sorted_files(dir_path):
        lower_name = name.lower()
        if lower_name == METADATA_MOVIE_XML:
            movie_xml_path = os.path.join(dir_path, name)
            break
        if lower_name == movie_nfo_file_name:
            movie_name_nfo_path = os.path.join(dir_path, name)
            break
        if name.endswith(SUFFIX_NAME_NFO):
            nfo_file_path = os.path.join(dir_path, name)

    if not (movie_name_nfo_path or movie_xml_path or nfo_file_path):
        raise NoMetadataFile(f"no metadata file in {dir_path}")

    if movie_name_nfo_path:
        return _imdb_and_year_nfo(movie_name_nfo_path, "movie")

    if movie_xml_path:
        try:
            return _imdb_and_year_movie_xml(movie_xml_path)
        except (DecodeError, OSError) as exc:
            _log.error("movie.xml could not be used, move on: %s", exc)

    if nfo_file_path:
        return _imdb_and_year_nfo(nfo_file_path, "movie")

    raise CanNotFindImdbId(f"no IMDB id for {movie_file_full_path}")


def get_imdb_info_for_series_dir(series_dir: str) -> VideoImdbInfo:
    """Read the IMDB info of a series from its ``tvshow.nfo`` (or any ``*.nfo``)."""
    nfo_file_path = ""
    for name in _sorted_files(series_dir):
        if name.upper() == METADATA_TV_NFO.upper():
            nfo_file_path = os.path.join(series_dir, name)
            break
        if name.endswith(SUFFIX_NAME_NFO):
            nfo_file_path = os.path.join(series_dir, name)
    if not nfo_file_path:
        raise NoMetadataFile(f"no metadata file in {series_dir}")
    return _imdb_and_year_nfo(nfo_file_path, "tvshow")


def get_imdb_info_for_series_episode(episode_file_path: str) -> VideoImdbInfo:
    """Read the air date of an episode from the ``.nfo`` beside its video file."""
    ep_dir = os.path.dirname(episode_file_path)
    nfo_name = os.path.basename(episode_file_path).replace(
        _go_ext(episode_file_path), SUFFIX_NAME_NFO
    )
    root = _parse_xml(os.path.join(ep_dir, nfo_name))
    info = VideoImdbInfo()
    for tag in ("aired", "premiered"):
        value = _child_text(root, "episodedetails", tag)
        if value is not None:
            info.release_date = value
    if not info.release_date:
        raise CanNotFindEpAiredTime(f"no aired time for {episode_file_path}")
    return info


def get_season_and_episode_from_sub_file_name(video_file_name: str) -> tuple[bool, int, int]:
    """Return ``(is_whole_season, season, episode)`` guessed from a file name.

    ``(False, 0, 0)`` means neither an episode nor a season marker was found.
    """
    upper_name = video_file_name.upper()
    match = _EPISODE_RE.search(upper_name)
    if match is None:
        season_match = _SEASON_RE.search(upper_name)
        if season_match is None:
            return False, 0, 0
        return True, get_number_as_int(season_match.group(1)), 0
    return False, get_number_as_int(match.group(1)), get_number_as_int(match.group(2))


def get_number_as_float(text: str) -> float:
    """Return the first number found in ``text``; ValueError if there is none."""
    match = _NUMBER_RE.search(text)
    if match is None:
        raise ValueError("get number not match")
    return float(match.group(0))


def get_number_as_int(text: str) -> int:
    """Return the first integer found in ``text``; ValueError if none or not integral."""
    match = _NUMBER_RE.search(text)
    if match is None:
        raise ValueError("get number not match")
    try:
        return int(match.group(0))
    except ValueError as exc:
        raise ValueError("get number parse int error") from exc