from __future__ import annotations

import logging
from typing import Iterable, Iterator

logger = logging.getLogger("wordgrid")


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Trie:
    """Prefix index over an uppercase word list.

    Built once and only read while solving, so a single instance can be
    shared between concurrent solves.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str):
        node = self.root
        for ch in word.upper():
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._size += 1

    def _walk(self, prefix: str) -> TrieNode | None:
        node = self.root
        for ch in prefix.upper():
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def contains_prefix(self, prefix: str) -> bool:
        node = self._walk(prefix)
        if node is None:
            return False
        return node.is_word or bool(node.children)

    def is_word(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_word

    @staticmethod
    def child_node(node: TrieNode, letter: str) -> TrieNode | None:
        """Advance one letter from `node`, or None if no word continues that way."""
        return node.children.get(letter.upper())

    def words(self) -> Iterator[str]:
        stack: list[tuple[TrieNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_word:
                yield prefix
            for ch in sorted(node.children, reverse=True):
                stack.append((node.children[ch], prefix + ch))

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)

    def __len__(self) -> int:
        return self._size

    @classmethod
    def from_word_list(cls, words: Iterable[str], min_length: int = 4) -> Trie:
        trie = cls()
        for word in words:
            word = word.strip()
            if len(word) >= min_length:
                trie.insert(word)
        return trie


def load_trie(path: str, min_length: int = 4) -> Trie:
    trie = Trie()
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().upper()
            if len(word) >= min_length and word.isalpha():
                trie.insert(word)
    logger.info("Loaded %d words from %s (min_length=%d)", len(trie), path, min_length)
    return trie
