from __future__ import annotations
import logging
from typing import Iterable, List

from .models import RawMatch, ResolvedMatch

log = logging.getLogger(__name__)


class MatchResolver:
    """
    Merge per-pattern matches into one non-overlapping, reading-order list.

    Policy:
      1. sort by start offset, then pattern priority (earlier-declared wins);
         remaining ties keep scanner order (sorted() is stable)
      2. drop any candidate intersecting the last accepted span; spans are
         never trimmed or merged
      3. accepted matches get ids 0..N-1 in acceptance order
    """

    @staticmethod
    def resolve(matches: Iterable[RawMatch]) -> List[ResolvedMatch]:
        candidates = sorted(matches, key=lambda m: (m.start, m.priority))

        accepted: List[ResolvedMatch] = []
        last: RawMatch | None = None
        for m in candidates:
            if last is not None and m.overlaps(last):
                continue
            accepted.append(ResolvedMatch(id=len(accepted), raw=m))
            last = m

        log.debug("overlap resolution: %d -> %d matches", len(candidates), len(accepted))
        return accepted
