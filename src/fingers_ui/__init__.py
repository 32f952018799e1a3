"""Module-level convenience API over fingers.Engine (one engine per process)."""
from __future__ import annotations
import time
from typing import Mapping, Optional, Union

from fingers import Engine, HintSet

_engine: Engine | None = None


def initialize(config: Optional[Mapping[str, str]] = None, verbose: bool = False) -> Engine:
    """
    Resolve configuration and build the process-wide engine.
    Raises fingers.ConfigurationError on a bad alphabet or pattern.
    """
    global _engine
    t0 = time.perf_counter()
    _engine = Engine.from_config(config, verbose=verbose)
    if verbose:
        print(f"[ready] init complete in {time.perf_counter() - t0:.3f}s")
    return _engine


def hints(capture: Union[bytes, str]) -> HintSet:
    """Scan a capture and return its matches and hints."""
    if _engine is None:
        raise RuntimeError("Engine not initialized. Call initialize(...) first.")
    return _engine.process(capture)
