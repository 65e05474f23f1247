"""Name, detect and organise Chinese subtitles for video libraries."""

__version__ = "0.1.0"

__all__ = [
    "decode",
    "formatters",
    "language",
    "log",
    "notify",
    "parser_hub",
    "proxy",
    "sub_helper",
    "timeline",
    "useragent",
    "util",
]