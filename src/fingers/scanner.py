# src/fingers/scanner.py
from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from .models import Pattern, RawMatch, ScanReport
from .normalize import snap_span

log = logging.getLogger(__name__)


class PatternScanner:
    """
    Runs every pattern over the whole text on its own; patterns never see
    each other's matches.

    A matcher that raises only loses its own matches: the error is logged and
    recorded in the ScanReport, and the remaining patterns still run.
    """

    def __init__(self, patterns: Sequence[Pattern]) -> None:
        self.patterns: Tuple[Pattern, ...] = tuple(patterns)

    def scan(
        self,
        text: str,
        *,
        degraded: Sequence[Tuple[int, int]] = (),
        report: ScanReport | None = None,
    ) -> List[RawMatch]:
        report = report if report is not None else ScanReport()
        regions = sorted(degraded)
        out: List[RawMatch] = []

        for pattern in self.patterns:
            try:
                found = list(pattern.scan(text))
            except Exception as exc:  # matcher is a black box
                log.warning("pattern %r failed, skipping it: %s", pattern.name, exc)
                report.failures[pattern.name] = f"{type(exc).__name__}: {exc}"
                continue

            if regions:
                found = [self._coarsen(text, m, regions) for m in found]
            out.extend(found)

        log.debug("scanned %d patterns, %d raw matches", len(self.patterns), len(out))
        return out

    @staticmethod
    def _coarsen(text: str, m: RawMatch, regions: List[Tuple[int, int]]) -> RawMatch:
        """
        Byte-safe fallback for matches touching malformed input: widen the span
        to whole regions and highlight the entire match.
        """
        start, end, touched = snap_span(m.start, m.end, regions)
        if not touched:
            return m
        return RawMatch(
            priority=m.priority,
            pattern=m.pattern,
            start=start,
            end=end,
            hl_start=start,
            hl_end=end,
            text=text[start:end],
            degraded=True,
        )
