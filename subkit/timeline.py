"""Helpers for matching dialogue between two subtitles to align timelines."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass


@dataclass(frozen=True)
class MatchIndex:
    """A run of matched dialogues: start indexes in base and source, and similarity."""

    base_now_index: int
    src_now_index: int
    similarity: float


class SubCompare:
    """Checks that base and source indexes advance together for N dialogues in a row."""

    def __init__(self, max_compare_dialogue: int) -> None:
        self.max_compare_dialogue = max_compare_dialogue
        self.clear()

    def add(self, base_now_index: int, src_now_index: int) -> bool:
        """Feed the next pair; False if it does not continue the expected run."""
        if not self._base_index_set:
            steps = range(self.max_compare_dialogue)
            self._base_index_set = {base_now_index + i for i in steps}
            self._src_index_set = {src_now_index + i for i in steps}
            self._base_index_list = [base_now_index + i for i in steps]
            self._src_index_list = [src_now_index + i for i in steps]
            self._base_now_index = base_now_index
            self._src_now_index = src_now_index
        if base_now_index not in self._base_index_set or src_now_index not in self._src_index_set:
            return False
        if not self._base_index_list or not self._src_index_list:
            return False
        if self._base_index_list[0] != base_now_index or self._src_index_list[0] != src_now_index:
            return False
        self._base_index_list.pop(0)
        self._src_index_list.pop(0)
        return True

    def check(self) -> bool:
        """True once the whole run of pairs has been added."""
        return not self._base_index_list and not self._src_index_list

    def clear(self) -> None:
        """Forget the current run."""
        self._base_index_set: set[int] = set()
        self._src_index_set: set[int] = set()
        self._base_index_list: list[int] = []
        self._src_index_list: list[int] = []
        self._base_now_index = -1
        self._src_now_index = -1

    def start_index(self) -> tuple[int, int]:
        """Base and source index at which the current run started, or ``(-1, -1)``."""
        return self._base_now_index, self._src_now_index


def stop_word_counter(text: str, per: int) -> list[str]:
    """Most frequent words of ``text``: the top ``per`` percent, plus one."""
    counts = Counter(text.split())
    by_count = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    break_index = len(by_count) * per // 100
    return [word for word, _ in by_count[: break_index + 1]]