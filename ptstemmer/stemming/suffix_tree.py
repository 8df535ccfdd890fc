"""
Suffix tree for longest-suffix lookups.

Suffixes are inserted in reverse order (last character first), so matching a
word walks the tree from the end of the word inward. A single pass over the
word finds the longest registered suffix, independent of how many suffixes
the tree holds.

Nodes live in a flat arena (list) and children are referenced by index:

    tree = SuffixTree().add("ismos", 1).add("a", 1).add("ma", 1)
    tree.longest_suffix("algorismos")   # ('ismos', 1)
    tree.longest_suffix("algoritmos")   # ('', -1)
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

NO_CATEGORY = -1
NO_MATCH: Tuple[str, int] = ("", NO_CATEGORY)

ROOT = 0


@dataclass
class _Node:
    """Arena node: outgoing edges plus the suffix (if any) ending here"""
    children: Dict[str, int] = field(default_factory=dict)
    suffix: str = ""
    category: int = NO_CATEGORY


class SuffixTree:
    """
    Stores (suffix, category) pairs and answers longest-suffix queries.

    The category is an opaque small integer; the stemmer uses it to pick the
    rewrite action for a matched suffix.
    """

    def __init__(self):
        self._nodes: List[_Node] = [_Node()]
        self._size = 0

    @classmethod
    def from_entries(cls, entries: Iterable[Tuple[str, int]]) -> "SuffixTree":
        """Build a tree from (suffix, category) pairs"""
        tree = cls()
        for suffix, category in entries:
            tree.add(suffix, category)
        return tree

    def add(self, suffix: str, category: int) -> "SuffixTree":
        """
        Register a suffix under a category.

        Re-adding an existing suffix overwrites its category.

        Args:
            suffix: Non-empty suffix text
            category: Category id (non-negative)

        Returns:
            The tree itself, so calls can be chained

        Raises:
            ValueError: If suffix is empty
        """
        if not suffix:
            raise ValueError("Suffix must be a non-empty string")

        current = ROOT
        for char in reversed(suffix):
            child = self._nodes[current].children.get(char)
            if child is None:
                child = len(self._nodes)
                self._nodes.append(_Node())
                self._nodes[current].children[char] = child
            current = child

        node = self._nodes[current]
        if not node.suffix:
            self._size += 1
        node.suffix = suffix
        node.category = category
        return self

    def contains(self, word: str) -> bool:
        """True if word was registered verbatim as a suffix"""
        current = ROOT
        for char in reversed(word):
            child = self._nodes[current].children.get(char)
            if child is None:
                return False
            current = child

        node = self._nodes[current]
        return node.suffix != "" and node.suffix == word

    def longest_suffix(self, word: str) -> Tuple[str, int]:
        """
        Find the longest registered suffix that ends word.

        Args:
            word: Word to match against

        Returns:
            (suffix, category) of the longest match, or NO_MATCH ("", -1)
        """
        current = ROOT
        best_suffix, best_category = NO_MATCH
        best_length = -1

        for char in reversed(word):
            child = self._nodes[current].children.get(char)
            if child is None:
                break
            current = child

            node = self._nodes[current]
            if node.suffix and len(node.suffix) > best_length:
                best_suffix = node.suffix
                best_category = node.category
                best_length = len(node.suffix)

        return best_suffix, best_category

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SuffixTree(suffixes={self._size}, nodes={len(self._nodes)})"
