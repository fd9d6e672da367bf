from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from wordgrid.grid import Position


@dataclass(frozen=True)
class SolveResult:
    words: list[str]
    words_by_length: dict[int, list[str]]
    word_paths: dict[str, list[list[Position]]]
    total_words: int
    solve_time: float = field(compare=False)  # ms

    def to_dict(self) -> dict:
        """Flat JSON-ready document; positions become [row, col] lists."""
        return {
            "words": list(self.words),
            "words_by_length": {length: list(ws) for length, ws in self.words_by_length.items()},
            "word_paths": {
                word: [[list(pos) for pos in path] for path in paths]
                for word, paths in self.word_paths.items()
            },
            "total_words": self.total_words,
            "solve_time": self.solve_time,
        }


def aggregate(found: Mapping[str, list[list[Position]]], solve_time: float = 0.0) -> SolveResult:
    """Package raw word -> paths associations into a sorted SolveResult."""
    words = sorted(set(found))

    words_by_length: dict[int, list[str]] = {}
    for w in words:
        words_by_length.setdefault(len(w), []).append(w)
    words_by_length = {length: words_by_length[length] for length in sorted(words_by_length)}

    word_paths = {w: [list(path) for path in found[w]] for w in words}

    return SolveResult(
        words=words,
        words_by_length=words_by_length,
        word_paths=word_paths,
        total_words=len(words),
        solve_time=solve_time,
    )
