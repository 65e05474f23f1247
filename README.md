# subkit

A library of helpers for Chinese subtitles that sit next to movies and TV episodes in a media library.
It reads metadata files, generates and recognises subtitle file names, classifies languages, and scans folders.

## Installation

```
pip install subkit
```

## Modules

- `subkit.decode`
  - `get_imdb_info_for_movie`, `get_imdb_info_for_series_dir` and `get_imdb_info_for_series_episode` read IMDB ids, titles, years and air dates. They look in `<video>.nfo`, `movie.xml` and `tvshow.nfo` and return a `VideoImdbInfo`.
  - When there is no metadata file, or the file lacks the data, they raise `NoMetadataFile`, `CanNotFindImdbId` or `CanNotFindEpAiredTime`, all subclasses of `DecodeError`.
  - `get_season_and_episode_from_sub_file_name` returns `(is_whole_season, season, episode)`.
  - `get_number_as_float` and `get_number_as_int` pull the first number out of a string.
- `subkit.formatters`
  - `EmbyFormatter` generates and recognises names like `Movie.chinese(简英,shooter).ass`.
  - `NormalFormatter` does the same for names like `Movie.zh.ass`. It reads the language from the subtitle content through the parser it is given.
  - `is_old_version_sub_prefix_name` recognises legacy names such as `.chs_en[shooter].ass` and returns the Emby style name.
  - `get_sub_formatter` selects a formatter by its `FormatterName`.
- `subkit.language`
  - The `Language` enum and conversions between languages and their descriptions: `lang_converter`, `lang_to_chinese_string`, `chinese_string_to_lang`, `chinese_iso_string_to_lang`, `lang_to_emby_name_old`.
  - The checks `has_chinese_lang` and `is_bilingual_subtitle`.
  - `change_file_coding_to_utf8`, which detects the charset of some bytes and re-encodes them as UTF-8.
- `subkit.parser_hub`
  - `SubParserHub` tries a chain of subtitle parsers that you supply and returns a `SubFileInfo`.
  - `is_sub_ext_wanted` and `is_sub_type_wanted` test names for `.ass`, `.ssa` and `.srt`.
- `subkit.sub_helper`
  - `select_chinese_best_subtitle` and `select_chinese_best_bilingual_subtitle` pick a subtitle.
  - `search_matched_sub_file` scans a folder for subtitle files.
  - `search_video_match_sub_file_and_remove_ext_mark` strips the `.default` and `.forced` marks from a video's subtitles.
  - `delete_one_season_sub_cache_folder` removes `Sub_S1E0` style cache folders.
  - `add_front_name` adds a prefix to a file name.
- `subkit.timeline` provides `SubCompare`, `MatchIndex` and `stop_word_counter`. They are building blocks for matching dialogue across two subtitles.
- `subkit.util`
  - `new_http_client` returns a `requests` session with a random user agent. `ReqParam` carries the proxy, user agent and referer for it.
  - `download_file` fetches a URL.
  - Temp and debug folders under the working directory.
  - `search_matched_video_file`, `copy_dir`, `clear_folder` and other file helpers.
- `subkit.notify` provides `NotifyCenter`, which keeps the latest notice per group and sends them to a webhook with GET requests.
- `subkit.proxy` provides `proxy_test`, which times a request through an `http://` proxy and raises `ProxyError` on failure.
- `subkit.useragent` provides `random_user_agent`, which returns a browser or a search-engine crawler user agent.
- `subkit.log` provides `get_logger`, which returns a logger that writes to stderr and to a daily rotated file in `Logs/`.

## Examples

```python
from subkit.formatters import EmbyFormatter, is_old_version_sub_prefix_name
from subkit.language import Language

emby = EmbyFormatter()
name, default_name, forced_name = emby.generate_mix_sub_name(
    "Django Unchained (2012) Bluray-1080p.mp4", ".ass", Language.CHINESE_SIMPLE_ENGLISH, "shooter"
)
# name == "Django Unchained (2012) Bluray-1080p.chinese(简英,shooter).ass"

match = emby.is_match_this_format(name)
# match.sub_lang == Language.CHINESE_SIMPLE_ENGLISH, match.extra_sub_pre_name == "shooter"

result = is_old_version_sub_prefix_name("Loki - S01E01.chs[subhd].ass")
if result is not None:
    old_ext, new_name = result
    # new_name == "Loki - S01E01.chinese(简,subhd).ass"
```

```python
from subkit.decode import get_imdb_info_for_movie, get_season_and_episode_from_sub_file_name

info = get_imdb_info_for_movie("/media/movies/Army of the Dead (2021)/Army of the Dead (2021).mkv")
print(info.imdb_id, info.year)

is_season_pack, season, episode = get_season_and_episode_from_sub_file_name(
    "Killing.Eve.S02E01.Do.You.ass"
)
```

## What it does not do

- There is no command-line program.
- There are no ASS or SRT parsers. `SubParserHub` and `NormalFormatter` work with parser objects that you provide.
- It does not download from subtitle sites.
- It does not talk to a media server.
- It keeps no database of past renames.
- `subkit.timeline` supplies the matching helpers but does not compute or apply a timeline offset.

## Running the tests

```
pip install -e .[test]
pytest
```