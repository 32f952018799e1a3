from __future__ import annotations
import bisect
from typing import Iterable, List, Tuple

from .models import Exact, Hint, LookupResult, NoMatch, Partial

_MAX_CHAR = "\U0010ffff"


class PrefixLookup:
    """
    Read-only answer table for incremental typing.
    Codes are kept sorted so every prefix query is one bisect range.
    """
    def __init__(self, hints: Iterable[Hint]) -> None:
        pairs: List[Tuple[str, int]] = sorted((h.code, h.match_id) for h in hints)
        for (a, _), (b, _) in zip(pairs, pairs[1:]):
            if a == b:
                raise ValueError(f"duplicate hint code {a!r}")
        self._codes: List[str] = [c for c, _ in pairs]
        self._ids: List[int] = [i for _, i in pairs]

    def query(self, typed: str) -> LookupResult:
        lo = bisect.bisect_left(self._codes, typed)
        hi = bisect.bisect_right(self._codes, typed + _MAX_CHAR)
        if lo == hi:
            return NoMatch()
        # prefix-free: an exact hit is the only code in its range
        if hi - lo == 1 and self._codes[lo] == typed:
            return Exact(self._ids[lo])
        return Partial(tuple(sorted(self._ids[lo:hi])))

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(self._codes)

    def __contains__(self, code: object) -> bool:
        if not isinstance(code, str):
            return False
        i = bisect.bisect_left(self._codes, code)
        return i < len(self._codes) and self._codes[i] == code

    def __len__(self) -> int:
        return len(self._codes)
