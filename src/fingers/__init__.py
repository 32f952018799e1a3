"""
Fingers Hint Engine

This package finds selectable things (URLs, paths, hashes, IPs, UUIDs,
git-status files, ...) in captured terminal text and gives every occurrence a
short hint code made of keyboard-layout keys, so a user can pick it with a
couple of keystrokes.

The pipeline is split into small, pure steps:
- PatternScanner: run each compiled pattern over the text independently
- MatchResolver: merge results into one non-overlapping, reading-order list
- HuffmanHintAssigner: K-ary Huffman codes over the layout alphabet
- PrefixLookup: classify what the user has typed so far

Example Usage:
    from fingers import Engine

    engine = Engine.from_config({"keyboard_layout": "qwerty-homerow"})
    hints = engine.process("visit https://example.com and /etc/hosts")

    for match, hint in zip(hints.matches, hints.hints):
        print(hint.code, match.text)

    hints.query("a")   # -> Exact(match_id=0)
"""

# src/fingers/__init__.py
from .config import ConfigurationError
from .engine import Engine, HintSet
from .huffman import HuffmanHintAssigner
from .loader import Settings, load_settings, alphabet_for, compile_patterns
from .lookup import PrefixLookup
from .models import Exact, Hint, NoMatch, Partial, Pattern, RawMatch, ResolvedMatch, ScanReport
from .priority_queue import PriorityQueue
from .resolver import MatchResolver
from .scanner import PatternScanner

__version__ = "1.0.0"
__all__ = [
    "ConfigurationError",
    "Engine",
    "HintSet",
    "HuffmanHintAssigner",
    "Settings",
    "load_settings",
    "alphabet_for",
    "compile_patterns",
    "PrefixLookup",
    "Exact",
    "Hint",
    "NoMatch",
    "Partial",
    "Pattern",
    "RawMatch",
    "ResolvedMatch",
    "ScanReport",
    "PriorityQueue",
    "MatchResolver",
    "PatternScanner",
]
