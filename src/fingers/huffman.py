# src/fingers/huffman.py
"""
K-ary Huffman hint codes.

Every match has the same weight, so the tree only decides how many codes of
each length are needed; the codes themselves are then laid out canonically
(shortest first, alphabet order) so the first matches in reading order get the
shortest, most comfortable keys.

Example with alphabet "asdf" and 5 matches:
    tree depths  -> [1, 1, 1, 2, 2]
    codes        -> a, s, d, fa, fs
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from .config import ConfigurationError
from .models import Hint, HintNode, ResolvedMatch
from .priority_queue import PriorityQueue

log = logging.getLogger(__name__)


class HuffmanHintAssigner:
    """
    Assign prefix-free codes over an ordered alphabet to resolved matches.
    The result depends only on (number of matches, alphabet).
    """

    def __init__(self, alphabet: Sequence[str]) -> None:
        symbols = tuple(alphabet)
        if len(symbols) < 2:
            raise ConfigurationError(
                f"alphabet needs at least 2 symbols to build a prefix code, got {len(symbols)}"
            )
        if any(len(s) != 1 for s in symbols):
            raise ConfigurationError("alphabet symbols must be single characters")
        if len(set(symbols)) != len(symbols):
            raise ConfigurationError(f"alphabet has duplicate symbols: {''.join(symbols)!r}")
        self.alphabet: Tuple[str, ...] = symbols
        self.arity: int = len(symbols)

    # ------------- public -------------

    def assign(self, matches: Sequence[ResolvedMatch]) -> List[Hint]:
        """Return one Hint per match, in the order given."""
        ids = [m.id for m in matches]
        n = len(ids)
        if n == 0:
            return []
        if n <= self.arity:
            return [Hint(match_id=mid, code=self.alphabet[i]) for i, mid in enumerate(ids)]

        codes = self._canonical_codes(self.code_lengths(n))
        log.debug("assigned %d hints over %d symbols (max length %d)",
                  n, self.arity, len(codes[-1]))
        return [Hint(match_id=mid, code=code) for mid, code in zip(ids, codes)]

    def dummy_count(self, n: int) -> int:
        """Weight-0 leaves needed so that (leaves - 1) % (K - 1) == 0."""
        rem = (n - 1) % (self.arity - 1)
        return 0 if rem == 0 else (self.arity - 1) - rem

    def build_tree(self, n: int) -> Tuple[List[HintNode], int]:
        """
        Build the Huffman tree for n uniform-weight leaves.
        Returns (arena, root_index); leaves 0..n-1 are the real ones, in rank
        order, followed by the dummies.
        """
        arena: List[HintNode] = []
        queue: PriorityQueue[int] = PriorityQueue()

        for rank in range(n):
            arena.append(HintNode(weight=1, match_id=rank))
            queue.insert(1, len(arena) - 1)
        # dummies go in last so they lose every tie against real leaves
        for _ in range(self.dummy_count(n)):
            arena.append(HintNode(weight=0, dummy=True))
            queue.insert(0, len(arena) - 1)

        while len(queue) > 1:
            picked = [queue.extract_min() for _ in range(min(self.arity, len(queue)))]
            weight = sum(w for w, _, _ in picked)
            arena.append(HintNode(weight=weight, children=tuple(idx for _, _, idx in picked)))
            queue.insert(weight, len(arena) - 1)

        _, _, root = queue.extract_min()
        return arena, root

    def code_lengths(self, n: int) -> List[int]:
        """Depths of the real leaves, ascending."""
        arena, root = self.build_tree(n)
        depths: List[int] = []
        stack = [(root, 0)]
        while stack:
            idx, depth = stack.pop()
            node = arena[idx]
            if node.is_leaf:
                if not node.dummy:
                    depths.append(depth)
                continue
            for child in node.children:
                stack.append((child, depth + 1))
        depths.sort()
        return depths

    # ------------- internals -------------

    def _canonical_codes(self, lengths: List[int]) -> List[str]:
        """
        Canonical K-ary codes for ascending lengths: each code is the previous
        one plus one, padded with the first symbol when the length grows.
        """
        k = self.arity
        codes: List[str] = []
        code = 0
        prev_len = lengths[0]
        for i, length in enumerate(lengths):
            if i:
                code = (code + 1) * k ** (length - prev_len)
            codes.append(self._spell(code, length))
            prev_len = length
        return codes

    def _spell(self, value: int, length: int) -> str:
        digits = []
        for _ in range(length):
            value, d = divmod(value, self.arity)
            digits.append(self.alphabet[d])
        if value:
            raise RuntimeError(f"code does not fit in {length} symbols")
        return "".join(reversed(digits))
