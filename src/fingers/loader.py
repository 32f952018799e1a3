from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence, Tuple

import regex

from .config import (
    ALPHABETS,
    BUILTIN_PATTERNS,
    DEFAULT_LAYOUT,
    HIGHLIGHT_GROUP,
    MAX_USER_PATTERNS,
    PATTERN_TIMEOUT,
    ConfigurationError,
)
from .models import Pattern

log = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Everything one activation needs: the alphabet and the ordered patterns."""
    alphabet: Tuple[str, ...]
    patterns: Tuple[Pattern, ...]
    reuse_hints: bool = False


def alphabet_for(layout: str) -> Tuple[str, ...]:
    """Symbols for a keyboard layout; unknown layouts fall back to qwerty."""
    chars = ALPHABETS.get(layout)
    if chars is None:
        log.warning("unknown keyboard layout %r, using %r", layout, DEFAULT_LAYOUT)
        chars = ALPHABETS[DEFAULT_LAYOUT]
    return tuple(chars)


def _compile(name: str, source: str, priority: int, timeout: Optional[float]) -> Pattern:
    try:
        rx = regex.compile(source)
    except regex.error as exc:
        raise ConfigurationError(f"invalid pattern {name!r}: {exc}") from exc
    group = HIGHLIGHT_GROUP if HIGHLIGHT_GROUP in rx.groupindex else None
    return Pattern(name=name, regex=rx, priority=priority, group=group, timeout=timeout)


def compile_patterns(
    named_sources: Sequence[Tuple[str, str]],
    timeout: Optional[float] = PATTERN_TIMEOUT,
) -> Tuple[Pattern, ...]:
    """Compile (name, regex) pairs; list order becomes priority order."""
    return tuple(_compile(name, src, i, timeout) for i, (name, src) in enumerate(named_sources))


def resolve_builtin_patterns(enabled: str) -> List[Tuple[str, str]]:
    """
    "all" -> every builtin in declaration order.
    Otherwise a comma list of names; unknown names are skipped with a warning.
    """
    if enabled.strip() == "all":
        return list(BUILTIN_PATTERNS.items())
    out: List[Tuple[str, str]] = []
    for name in (n.strip() for n in enabled.split(",")):
        if not name:
            continue
        src = BUILTIN_PATTERNS.get(name)
        if src is None:
            log.warning("unknown builtin pattern %r ignored", name)
            continue
        out.append((name, src))
    return out


def load_settings(config: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Resolve a flat key/value configuration (as handed over by the host):
      keyboard_layout          layout name (default qwerty)
      alphabet                 explicit symbols, overrides keyboard_layout
      enabled_builtin_patterns "all" (default) or "url,path,..."
      pattern_0..pattern_19    user regexes, appended after the builtins
      reuse_hints              "true" to share hints between equal texts
      pattern_timeout          seconds per pattern per capture (default 1.0)
    """
    config = config or {}

    if config.get("alphabet"):
        alphabet = tuple(config["alphabet"])
    else:
        alphabet = alphabet_for(config.get("keyboard_layout", DEFAULT_LAYOUT))

    sources = resolve_builtin_patterns(config.get("enabled_builtin_patterns", "all"))
    for i in range(MAX_USER_PATTERNS):
        key = f"pattern_{i}"
        if config.get(key):
            sources.append((key, config[key]))

    timeout = PATTERN_TIMEOUT
    if config.get("pattern_timeout"):
        try:
            timeout = float(config["pattern_timeout"])
        except ValueError as exc:
            raise ConfigurationError(f"invalid pattern_timeout: {config['pattern_timeout']!r}") from exc
        if timeout <= 0:
            raise ConfigurationError("pattern_timeout must be positive")

    reuse = str(config.get("reuse_hints", "")).strip().lower() in _TRUE
    return Settings(
        alphabet=alphabet,
        patterns=compile_patterns(sources, timeout=timeout),
        reuse_hints=reuse,
    )


def read_capture(path: str) -> bytes:
    """Raw pane dump; decoding (and malformed-byte handling) is left to decode_capture."""
    with open(path, "rb") as f:
        return f.read()
