from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from wordgrid.grid import Position, grid_shape, neighbors, validate_grid
from wordgrid.metrics import StageTimer
from wordgrid.results import SolveResult, aggregate
from wordgrid.trie import Trie, TrieNode

logger = logging.getLogger("wordgrid")

MIN_WORD_LENGTH = 4
MAX_PATHS_PER_WORD = 3


def find_words(
    grid: Sequence[Sequence[str]],
    trie: Trie,
    min_length: int = MIN_WORD_LENGTH,
    max_paths: int = MAX_PATHS_PER_WORD,
) -> dict[str, list[list[Position]]]:
    """Walk every adjacent, non-repeating cell path that spells a trie prefix.

    Returns a mapping of each word of at least `min_length` letters to the
    paths that spell it, in discovery order. At most `max_paths` paths are
    kept per word (`max_paths <= 0` keeps all of them); the word itself is
    found regardless of the cap. The grid is assumed to be valid.
    """
    rows, cols = grid_shape(grid)
    total_cells = rows * cols
    found: dict[str, list[list[Position]]] = {}

    cell_chars = [grid[r][c].upper() for r in range(rows) for c in range(cols)]
    cell_pos = [divmod(idx, cols) for idx in range(total_cells)]
    adjacency = [
        [nr * cols + nc for nr, nc in neighbors(cell_pos[idx], rows, cols)]
        for idx in range(total_cells)
    ]

    # Shared stacks; every push below is matched by a pop before returning
    letters: list[str] = []
    path: list[Position] = []

    def dfs(idx: int, node: TrieNode, visited: int):
        letters.append(cell_chars[idx])
        path.append(cell_pos[idx])

        if node.is_word and len(letters) >= min_length:
            word = "".join(letters)
            paths = found.get(word)
            if paths is None:
                found[word] = [list(path)]
            elif max_paths <= 0 or len(paths) < max_paths:
                paths.append(list(path))

        if node.children:
            for nidx in adjacency[idx]:
                if visited & (1 << nidx):
                    continue
                child = Trie.child_node(node, cell_chars[nidx])
                if child is not None:
                    dfs(nidx, child, visited | (1 << nidx))

        path.pop()
        letters.pop()

    for start in range(total_cells):
        node = Trie.child_node(trie.root, cell_chars[start])
        if node is not None:
            dfs(start, node, 1 << start)

    return found


def solve(
    grid: Sequence[Sequence[str]],
    trie: Trie,
    min_length: int = MIN_WORD_LENGTH,
    max_paths: int = MAX_PATHS_PER_WORD,
) -> SolveResult:
    """Find every dictionary word hidden in `grid`.

    Raises InvalidGrid before searching if the grid is empty, ragged or
    holds anything but single letters. An empty trie yields an empty result.
    """
    timer = StageTimer("solve")

    with timer.stage("validate"):
        validate_grid(grid)

    with timer.stage("search"):
        found = find_words(grid, trie, min_length, max_paths)

    with timer.stage("aggregate"):
        result = aggregate(found)

    result = replace(result, solve_time=timer.stop())

    rows, cols = grid_shape(grid)
    logger.info("Solved %dx%d grid: %d words in %.1fms", rows, cols, result.total_words, result.solve_time)
    return result
