"""General helpers: HTTP client setup, temp folders, file walking and copying."""

from __future__ import annotations

import logging
import os
import random
import re
import shutil
import subprocess
import sys
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Iterable

import requests

from subkit.useragent import random_user_agent

HTML_TIMEOUT = 60.0
DEBUG_FOLDER = "DebugFolder"
TMP_FOLDER = "TmpFolder"

VIDEO_EXT_MP4 = ".mp4"
VIDEO_EXT_MKV = ".mkv"
VIDEO_EXT_RMVB = ".rmvb"
VIDEO_EXT_ISO = ".iso"
DEFAULT_VIDEO_EXTS = frozenset({VIDEO_EXT_MP4, VIDEO_EXT_MKV, VIDEO_EXT_RMVB, VIDEO_EXT_ISO})

_log = logging.getLogger(__name__)
_random = random.Random()
_cached_folders: dict[str, Path] = {}
_custom_video_exts: list[str] = []
_wanted_exts: set[str] = set()

_FILENAME_RE = re.compile(r'filename=["]*([^"]+)["]*')


@dataclass(frozen=True)
class ReqParam:
    """Optional request settings: proxy, user agent and referer."""

    http_proxy: str = ""
    user_agent: str = ""
    referer: str = ""


class _TimeoutSession(requests.Session):
    """Session that applies a default timeout to every request."""

    def __init__(self, timeout: float) -> None:
        super().__init__()
        self.timeout = timeout

    def request(self, method, url, **kwargs):
        kwargs.setdefault("timeout", self.timeout)
        return super().request(method, url, **kwargs)


def random_second_duration(min_seconds: int, max_seconds: int) -> timedelta:
    """Return a random whole-second duration in ``[min_seconds, max_seconds)``."""
    if max_seconds <= min_seconds:
        raise ValueError("max_seconds must be greater than min_seconds")
    return timedelta(seconds=_random.randrange(min_seconds, max_seconds))


def new_http_client(
    req_param: ReqParam | None = None, timeout: float = HTML_TIMEOUT
) -> requests.Session:
    """Create a session with JSON content type, a user agent and optional proxy."""
    param = req_param or ReqParam()
    session = _TimeoutSession(timeout)
    if param.http_proxy:
        session.proxies = {"http": param.http_proxy, "https": param.http_proxy}
    else:
        session.trust_env = False
        session.proxies = {}
    session.headers.update(
        {
            "Content-Type": "application/json",
            "User-Agent": param.user_agent or random_user_agent(True),
        }
    )
    if param.referer:
        session.headers["Referer"] = param.referer
    return session


def download_file(url: str, req_param: ReqParam | None = None) -> tuple[bytes, str]:
    """Fetch ``url`` and return its body and the file name the server announced."""
    with new_http_client(req_param) as session:
        response = session.get(url)
    name = file_name_from_content_disposition(response.headers.get("Content-Disposition", ""))
    return response.content, name


def file_name_from_content_disposition(content_disposition: str) -> str:
    """Extract the file name from a Content-Disposition header, or ``""``."""
    if not content_disposition:
        return ""
    match = _FILENAME_RE.search(content_disposition)
    return match.group(1) if match else ""


def add_base_url(base_url: str, url: str) -> str:
    """Prefix ``url`` with ``base_url`` unless it is already absolute."""
    if "://" in url:
        return url
    return f"{base_url}{url}"


def _cached_folder(key: str, folder_name: str) -> Path:
    cached = _cached_folders.get(key)
    if cached is not None:
        return cached
    folder = Path.cwd() / folder_name
    folder.mkdir(parents=True, exist_ok=True)
    _cached_folders[key] = folder
    return folder


def get_debug_folder() -> Path:
    """Return the debug folder under the working directory, creating it."""
    return _cached_folder("debug", DEBUG_FOLDER)


def get_root_tmp_folder() -> Path:
    """Return the root cache folder under the working directory, creating it."""
    return _cached_folder("tmp", TMP_FOLDER)


def clear_root_tmp_folder() -> None:
    """Remove everything inside the root cache folder."""
    clear_folder(get_root_tmp_folder())


def get_tmp_folder(folder_name: str) -> Path:
    """Return a named sub-folder of the root cache folder, creating it."""
    folder = get_root_tmp_folder() / folder_name
    folder.mkdir(parents=True, exist_ok=True)
    return folder


def clear_folder(folder_name: str | os.PathLike) -> None:
    """Remove every file and sub-folder inside ``folder_name``."""
    with os.scandir(folder_name) as entries:
        children = sorted(entries, key=lambda entry: entry.name)
    for entry in children:
        if entry.is_dir(follow_symlinks=False):
            shutil.rmtree(entry.path)
        else:
            os.remove(entry.path)


def clear_tmp_folder(folder_name: str) -> None:
    """Empty a named cache sub-folder."""
    clear_folder(get_tmp_folder(folder_name))


def is_dir(path: str | os.PathLike) -> bool:
    """True if ``path`` exists and is a directory."""
    return os.path.isdir(path)


def is_file(path: str | os.PathLike) -> bool:
    """True if ``path`` exists and is not a directory."""
    return os.path.exists(path) and not os.path.isdir(path)


def video_name_search_keyword_maker(title: str, year: str) -> str:
    """Build a search keyword; the year is appended only from 2020 on."""
    try:
        int_year = int(year)
    except ValueError as exc:
        _log.error("video_name_search_keyword_maker year to int %s", exc)
        int_year = 0
    if int_year >= 2020:
        return f"{title} {year}"
    return title


def search_matched_video_file(directory: str | os.PathLike) -> list[str]:
    """Recursively list video files with a wanted extension.

    Errors in sub-folders are ignored; a missing top folder raises OSError.
    """
    directory = os.fspath(directory)
    with os.scandir(directory) as entries:
        children = sorted(entries, key=lambda entry: entry.name)
    found: list[str] = []
    for entry in children:
        full_path = directory + os.sep + entry.name
        if entry.is_dir():
            try:
                found.extend(search_matched_video_file(full_path))
            except OSError:
                continue
        elif is_wanted_video_ext(entry.name):
            found.append(full_path)
    return found


def set_custom_video_exts(exts: Iterable[str]) -> None:
    """Replace the user's extra video extensions (e.g. ``".avi"``)."""
    _custom_video_exts[:] = list(exts)
    _wanted_exts.clear()


def is_wanted_video_ext(file_name: str) -> bool:
    """True if the file's lower-cased extension is a watched video extension."""
    if not _wanted_exts:
        _wanted_exts.update(DEFAULT_VIDEO_EXTS)
        _wanted_exts.update(_custom_video_exts)
    return os.path.splitext(file_name)[1].lower() in _wanted_exts


def get_episode_key_name(season: int, episode: int) -> str:
    """Return the ``S<season>E<episode>`` key."""
    return f"S{season}E{episode}"


def copy_file(src: str | os.PathLike, dst: str | os.PathLike) -> None:
    """Copy a single file, keeping its permission bits."""
    shutil.copyfile(src, dst)
    shutil.copymode(src, dst)


def copy_dir(src: str | os.PathLike, dst: str | os.PathLike) -> None:
    """Copy a directory tree; failures on single entries are logged and skipped."""
    src_path = Path(src)
    dst_path = Path(dst)
    mode = src_path.stat().st_mode & 0o777
    dst_path.mkdir(mode=mode, parents=True, exist_ok=True)
    for child in sorted(src_path.iterdir(), key=lambda p: p.name):
        target = dst_path / child.name
        try:
            if child.is_dir():
                copy_dir(child, target)
            else:
                copy_file(child, target)
        except OSError as exc:
            _log.warning("copy_dir %s", exc)


def copy_test_data(src_dir: str | os.PathLike) -> Path:
    """Copy ``<src_dir>/org`` over a fresh ``<src_dir>/test`` and return the latter."""
    org_dir = Path(src_dir) / "org"
    test_dir = Path(src_dir) / "test"
    if is_dir(test_dir):
        clear_folder(test_dir)
    copy_dir(org_dir, test_dir)
    return test_dir


def close_chrome() -> bool:
    """Force-kill leftover browser processes; returns whether the command succeeded."""
    if sys.platform.startswith("linux"):
        command = ["/bin/sh", "-c", "pkill chrome"]
    elif sys.platform == "win32":
        command = ["cmd.exe", "/c", "taskkill /F /im notepad.exe"]
    else:
        _log.error("close_chrome OS: %s", sys.platform)
        return False
    try:
        subprocess.run(command, check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        _log.error("close_chrome %s", exc)
        return False
    return True


def os_check() -> bool:
    """True on the supported systems, Linux and Windows."""
    return sys.platform.startswith("linux") or sys.platform == "win32"


def fix_window_path_back_slash(path: str) -> str:
    """Replace the platform path separator with forward slashes."""
    return path.replace(os.sep, "/")