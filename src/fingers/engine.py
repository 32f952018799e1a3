# src/fingers/engine.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple, Union

from .config import ConfigurationError
from .huffman import HuffmanHintAssigner
from .loader import Settings, load_settings
from .lookup import PrefixLookup
from .models import Hint, LookupResult, ResolvedMatch, ScanReport
from .normalize import decode_capture
from .resolver import MatchResolver
from .scanner import PatternScanner

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class HintSet:
    """
    Result of one capture: matches in reading order, one hint per match, the
    lookup for typed input and the scan report. Rebuilt from scratch for every
    capture; nothing in here is ever mutated.
    """
    text: str
    matches: Tuple[ResolvedMatch, ...]
    hints: Tuple[Hint, ...]
    lookup: PrefixLookup
    report: ScanReport

    def __len__(self) -> int:
        return len(self.matches)

    def hint_for(self, match_id: int) -> str:
        return self.hints[match_id].code

    def query(self, typed: str) -> LookupResult:
        return self.lookup.query(typed)

    def as_dict(self) -> dict:
        rows = []
        for m, h in zip(self.matches, self.hints):
            row = m.as_dict()
            row["hint"] = h.code
            rows.append(row)
        return {"matches": rows, "report": self.report.as_dict()}


class Engine:
    """
    Thin orchestration layer gluing the pipeline together:
      decode -> PatternScanner -> MatchResolver -> HuffmanHintAssigner -> PrefixLookup

    Public API (used by CLI/Flask):
      * Engine(settings) / Engine.from_config(mapping): validate configuration
      * process(capture): build the HintSet for one capture (bytes or str)

    Configuration errors surface from the constructor, before any scan.
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        settings: Settings,
        *,
        require_patterns: bool = False,
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
        if require_patterns and not settings.patterns:
            raise ConfigurationError("no patterns enabled")

        self.settings = settings
        self._assigner = HuffmanHintAssigner(settings.alphabet)
        self._scanner = PatternScanner(settings.patterns)
        self._resolver = MatchResolver()
        log.info("engine ready: %d patterns, %d-key alphabet",
                 len(settings.patterns), len(settings.alphabet))

    @classmethod
    def from_config(cls, config: Optional[Mapping[str, str]] = None, **kwargs) -> "Engine":
        return cls(load_settings(config), **kwargs)

    # ------------- pipeline -------------

    def process(self, capture: Union[bytes, bytearray, str]) -> HintSet:
        captured = decode_capture(capture)
        report = ScanReport(degraded=list(captured.degraded))
        if captured.degraded:
            log.warning("capture has %d malformed region(s); matches there are coarsened",
                        len(captured.degraded))

        raw = self._scanner.scan(captured.text, degraded=captured.degraded, report=report)
        matches = self._resolver.resolve(raw)

        if self.settings.reuse_hints:
            hints, lookup = self._assign_shared(matches)
        else:
            hints = self._assigner.assign(matches)
            lookup = PrefixLookup(hints)

        log.info("capture processed: raw=%d resolved=%d failures=%d",
                 len(raw), len(matches), len(report.failures))
        return HintSet(
            text=captured.text,
            matches=tuple(matches),
            hints=tuple(hints),
            lookup=lookup,
            report=report,
        )

    # ------------- internals -------------

    def _assign_shared(self, matches: List[ResolvedMatch]) -> Tuple[List[Hint], PrefixLookup]:
        """
        One code per distinct highlighted text. The first match of each text
        owns the code in the lookup; repeats reuse it.
        """
        first_by_text: Dict[str, ResolvedMatch] = {}
        for m in matches:
            first_by_text.setdefault(m.text, m)

        owners = list(first_by_text.values())
        owner_hints = self._assigner.assign(owners)
        code_by_text = {m.text: h.code for m, h in zip(owners, owner_hints)}

        hints = [Hint(match_id=m.id, code=code_by_text[m.text]) for m in matches]
        return hints, PrefixLookup(owner_hints)
