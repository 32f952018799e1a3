# src/fingers/models.py
"""
Data models for the hint engine.

These containers carry no business logic beyond small accessors; scanning,
resolution and code assignment live in their own modules so that each step
stays a plain function of its inputs.

- Pattern: a named, compiled matcher with a priority and a highlight group.
- RawMatch / ResolvedMatch: occurrences before and after overlap resolution.
- HintNode: one slot of the Huffman construction arena.
- Hint: a match id paired with the code the user types to select it.
- ScanReport: what went wrong (but was recovered) while scanning.
- NoMatch / Partial / Exact: answers of PrefixLookup.query().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple, Union

import regex as re


@dataclass(frozen=True, slots=True)
class RawMatch:
    """
    One occurrence found by one pattern.

    Attributes
    ----------
    priority : int
        Declaration index of the pattern that produced it (lower wins).
    pattern : str
        Pattern name.
    start, end : int
        Half-open span in the captured text, in str (scalar) indices.
    hl_start, hl_end : int
        Half-open highlight span; equals (start, end) when the pattern
        declares no highlight group.
    text : str
        The highlighted text, i.e. what gets copied/opened on selection.
    degraded : bool
        True when the span touched a malformed-input region and had to be
        widened; the highlight is then the whole match.
    """
    priority: int
    pattern: str
    start: int
    end: int
    hl_start: int
    hl_end: int
    text: str
    degraded: bool = False

    def overlaps(self, other: "RawMatch") -> bool:
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True, slots=True)
class ResolvedMatch:
    """A RawMatch that survived overlap resolution; id is its reading-order rank."""
    id: int
    raw: RawMatch

    @property
    def pattern(self) -> str:
        return self.raw.pattern

    @property
    def span(self) -> Tuple[int, int]:
        return (self.raw.start, self.raw.end)

    @property
    def highlight(self) -> Tuple[int, int]:
        return (self.raw.hl_start, self.raw.hl_end)

    @property
    def text(self) -> str:
        return self.raw.text

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "pattern": self.raw.pattern,
            "start": self.raw.start,
            "end": self.raw.end,
            "hl_start": self.raw.hl_start,
            "hl_end": self.raw.hl_end,
            "text": self.raw.text,
            "degraded": self.raw.degraded,
        }


@dataclass(frozen=True, slots=True)
class Pattern:
    """
    A compiled matcher plus the metadata the scanner needs.

    The scanner only ever calls scan(); it never looks at the name except to
    label results and failures.
    """
    name: str
    regex: re.Pattern
    priority: int
    group: Optional[Union[str, int]] = None
    timeout: Optional[float] = None

    def scan(self, text: str) -> Iterator[RawMatch]:
        if self.timeout is None:
            found = self.regex.finditer(text)
        else:
            # regex raises TimeoutError once the budget is spent
            found = self.regex.finditer(text, timeout=self.timeout)
        for m in found:
            start, end = m.span()
            if start == end:
                continue  # nothing to select
            hl_start, hl_end = start, end
            if self.group is not None:
                try:
                    g_start, g_end = m.span(self.group)
                except IndexError:
                    g_start = g_end = -1  # group not declared by this regex
                if g_start != -1 and g_end > g_start:
                    hl_start, hl_end = g_start, g_end
            yield RawMatch(
                priority=self.priority,
                pattern=self.name,
                start=start,
                end=end,
                hl_start=hl_start,
                hl_end=hl_end,
                text=text[hl_start:hl_end],
            )


@dataclass(slots=True)
class HintNode:
    """
    Arena slot for the Huffman tree.

    A leaf has no children; match_id is None for dummy (weight-zero) leaves.
    An internal node lists child arena indices in alphabet-position order.
    """
    weight: int
    match_id: Optional[int] = None
    children: Tuple[int, ...] = ()
    dummy: bool = False

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True, slots=True)
class Hint:
    match_id: int
    code: str


@dataclass(slots=True)
class ScanReport:
    """
    Recovered problems from one scan.

    failures : pattern name -> error message for matchers that raised
    degraded : (start, end) runs of malformed input in the captured text
    """
    failures: dict[str, str] = field(default_factory=dict)
    degraded: list[Tuple[int, int]] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not self.failures and not self.degraded

    def as_dict(self) -> dict:
        return {
            "failures": dict(self.failures),
            "degraded": [list(r) for r in self.degraded],
        }


# ---- PrefixLookup answers ----

@dataclass(frozen=True, slots=True)
class NoMatch:
    kind = "no_match"


@dataclass(frozen=True, slots=True)
class Partial:
    match_ids: Tuple[int, ...]
    kind = "partial"


@dataclass(frozen=True, slots=True)
class Exact:
    match_id: int
    kind = "exact"


LookupResult = Union[NoMatch, Partial, Exact]
