from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple, Union

# lone surrogates produced by errors="surrogateescape" (one per bad byte)
_ESCAPE_LO = 0xD800
_ESCAPE_HI = 0xDFFF


@dataclass(frozen=True)
class CapturedText:
    text: str
    degraded: List[Tuple[int, int]] = field(default_factory=list)


def _is_lone_surrogate(ch: str) -> bool:
    return _ESCAPE_LO <= ord(ch) <= _ESCAPE_HI


def degraded_regions(text: str) -> List[Tuple[int, int]]:
    """
    Return maximal (start, end) runs of lone surrogates in text.
    Each run is one malformed byte sequence (e.g. a truncated UTF-8 character).
    """
    regions: List[Tuple[int, int]] = []
    run_start: int | None = None
    for i, ch in enumerate(text):
        if _is_lone_surrogate(ch):
            if run_start is None:
                run_start = i
        elif run_start is not None:
            regions.append((run_start, i))
            run_start = None
    if run_start is not None:
        regions.append((run_start, len(text)))
    return regions


def decode_capture(data: Union[bytes, bytearray, str]) -> CapturedText:
    """
    Turn a raw pane capture into scalar text plus its malformed regions.
      * bytes are decoded as UTF-8; invalid bytes survive as lone surrogates
        so offsets stay stable and nothing is silently dropped
      * str input is taken as is (it may already carry escaped bytes)
    """
    if isinstance(data, (bytes, bytearray)):
        text = bytes(data).decode("utf-8", errors="surrogateescape")
    else:
        text = data
    return CapturedText(text=text, degraded=degraded_regions(text))


def snap_span(start: int, end: int, regions: List[Tuple[int, int]]) -> Tuple[int, int, bool]:
    """
    Widen (start, end) so neither boundary falls strictly inside a degraded
    region. Returns (start, end, touched) where touched is True when the
    span intersects any region.
    """
    touched = False
    for r_start, r_end in regions:
        if r_start >= end:
            break
        if r_end <= start:
            continue
        touched = True
        if r_start < start < r_end:
            start = r_start
        if r_start < end < r_end:
            end = r_end
    return start, end, touched


def display_text(text: str) -> str:
    """Printable form: escaped bytes become U+FFFD."""
    return "".join("\ufffd" if _is_lone_surrogate(ch) else ch for ch in text)
