from __future__ import annotations
import argparse, sys, json
from fingers import ConfigurationError, Engine, Exact, NoMatch
from fingers.loader import read_capture
from fingers.normalize import display_text
from .selection import Selection


def _print_table(result) -> None:
    if not result.matches:
        print("(no matches)"); return
    print("#  Hint   Span         Pattern            Text")
    for m, h in zip(result.matches, result.hints):
        span = f"({m.span[0]},{m.span[1]})"
        flag = " [degraded]" if m.raw.degraded else ""
        print(f"{m.id:<2} {h.code:<6} {span:<12} {m.pattern:<18} {display_text(m.text)}{flag}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Hint matches in captured terminal text")
    p.add_argument("--file", default=None, help="Capture file (default: stdin)")
    p.add_argument("--layout", default=None, help="Keyboard layout, e.g. qwerty, dvorak-homerow")
    p.add_argument("--alphabet", default=None, help="Explicit hint symbols (overrides --layout)")
    p.add_argument("--patterns", default=None, help="Builtin patterns: 'all' or 'url,path,...'")
    p.add_argument("--pattern", action="append", default=[], help="Extra regex (repeatable)")
    p.add_argument("--reuse-hints", action="store_true", help="Same text -> same hint")
    p.add_argument("--type", dest="typed", default=None, help="Classify typed keys against the hints")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    config: dict[str, str] = {}
    if args.layout:
        config["keyboard_layout"] = args.layout
    if args.alphabet:
        config["alphabet"] = args.alphabet
    if args.patterns is not None:
        config["enabled_builtin_patterns"] = args.patterns
    for i, rx in enumerate(args.pattern):
        config[f"pattern_{i}"] = rx
    if args.reuse_hints:
        config["reuse_hints"] = "true"

    try:
        eng = Engine.from_config(config, verbose=args.verbose)
    except ConfigurationError as exc:
        print(f"configuration error: {exc}", file=sys.stderr)
        return 2

    capture = read_capture(args.file) if args.file else sys.stdin.buffer.read()
    result = eng.process(capture)

    if args.typed is not None:
        sel = Selection(result.lookup)
        outcome = result.query("")
        for ch in args.typed:
            outcome = sel.press(ch)
            if sel.done:
                break
        if isinstance(outcome, Exact):
            m = result.matches[outcome.match_id]
            print(json.dumps({"kind": outcome.kind, "match_id": m.id, "text": m.text})
                  if args.json else display_text(m.text))
            return 0
        if isinstance(outcome, NoMatch):
            print(json.dumps({"kind": outcome.kind}) if args.json else "(no match)")
            return 1
        print(json.dumps({"kind": outcome.kind, "match_ids": list(outcome.match_ids)})
              if args.json else "candidates: " + ", ".join(
                  result.hint_for(i) for i in outcome.match_ids))
        return 0

    if args.json:
        print(json.dumps(result.as_dict(), indent=2))
    else:
        _print_table(result)
        for name, err in result.report.failures.items():
            print(f"warning: pattern {name} failed: {err}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
