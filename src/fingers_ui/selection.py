from __future__ import annotations
from typing import List

from fingers.lookup import PrefixLookup
from fingers.models import Exact, LookupResult, NoMatch


class Selection:
    """
    Keystroke state over a PrefixLookup; no side effects happen here.

      NoMatch -> the buffer is reset
      Partial -> keep typing
      Exact   -> single mode: done; multi mode: remember the id, clear the buffer
    """
    def __init__(self, lookup: PrefixLookup, *, multi: bool = False) -> None:
        self.lookup = lookup
        self.multi = multi
        self.buffer = ""
        self.chosen: List[int] = []
        self.done = False
        # fold key case only when no code could tell the difference
        codes = "".join(lookup.codes)
        self._fold = codes == codes.lower()

    def press(self, symbol: str) -> LookupResult:
        if self.done:
            raise RuntimeError("selection already finished")
        self.buffer += symbol.lower() if self._fold else symbol
        result = self.lookup.query(self.buffer)
        if isinstance(result, NoMatch):
            self.buffer = ""
        elif isinstance(result, Exact):
            self.chosen.append(result.match_id)
            self.buffer = ""
            if not self.multi:
                self.done = True
        return result

    def backspace(self) -> None:
        self.buffer = self.buffer[:-1]

    def toggle_multi(self) -> List[int]:
        """Leaving multi mode finishes the selection with what was picked."""
        self.multi = not self.multi
        if not self.multi:
            return self.finish()
        return []

    def finish(self) -> List[int]:
        self.done = True
        return list(self.chosen)

    @property
    def candidates(self) -> LookupResult:
        return self.lookup.query(self.buffer)
