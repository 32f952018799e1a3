from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from fingers import ConfigurationError, Engine, Exact, NoMatch

app = Flask(__name__)
_engine: Engine | None = None


def _engine_for(payload: dict) -> Engine:
    """Per-request settings win; otherwise the engine configured at startup."""
    settings = payload.get("settings")
    if settings:
        return Engine.from_config({str(k): str(v) for k, v in settings.items()})
    global _engine
    if _engine is None:
        _engine = Engine.from_config()
    return _engine


def _payload() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object body")
    if not isinstance(data.get("text"), str):
        raise ValueError("'text' must be a string")
    return data


@app.errorhandler(ConfigurationError)
@app.errorhandler(ValueError)
def bad_request(exc: Exception):
    return jsonify({"error": str(exc)}), 400


# ---------- API ----------
@app.post("/api/hints")
def api_hints():
    data = _payload()
    result = _engine_for(data).process(data["text"])
    return jsonify(result.as_dict())


@app.post("/api/lookup")
def api_lookup():
    data = _payload()
    typed = data.get("typed", "")
    if not isinstance(typed, str):
        raise ValueError("'typed' must be a string")
    result = _engine_for(data).process(data["text"]).query(typed)
    if isinstance(result, NoMatch):
        return jsonify({"kind": result.kind})
    if isinstance(result, Exact):
        return jsonify({"kind": result.kind, "match_id": result.match_id})
    return jsonify({"kind": result.kind, "match_ids": list(result.match_ids)})


@app.get("/health")
def health():
    return jsonify({"ok": True})


# ---------- UI ----------
@app.get("/")
def home():
    # A tiny page: paste terminal text, see the hints. No external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Fingers • Flask UI</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530; --hint:#45d483;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:980px; margin:24px auto; padding:0 16px }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0 }
textarea{
  width:100%; min-height:160px; padding:12px 14px; border-radius:12px;
  border:1px solid var(--border); background:#0b1117; color:var(--ink);
}
.mono{ font-family: ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, monospace }
.row{
  display:grid; grid-template-columns:4rem 8rem 1fr; gap:10px;
  padding:8px 12px; border-top:1px solid var(--border);
}
.hint{ color:var(--hint); font-weight:700 }
.small{ color:var(--muted) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Fingers</h1>
      <textarea id="text" class="mono" placeholder="Paste terminal output…"></textarea>
      <div id="stats" class="small">Ready.</div>
      <div id="out"></div>
    </div>
  </div>
<script>
const text = document.querySelector("#text"), out = document.querySelector("#out"),
      stats = document.querySelector("#stats");
let t;
function esc(s){ return String(s).replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
async function run(){
  const resp = await fetch("/api/hints", {method:"POST", headers:{"Content-Type":"application/json"},
                                          body: JSON.stringify({text: text.value})});
  const data = await resp.json();
  if(!resp.ok){ stats.textContent = `Error: ${data.error}`; return; }
  stats.textContent = `Matches: ${data.matches.length}`;
  out.innerHTML = data.matches.map(m =>
    `<div class="row"><div class="hint mono">${esc(m.hint)}</div>` +
    `<div class="small">${esc(m.pattern)}</div><div class="mono">${esc(m.text)}</div></div>`).join("");
}
text.addEventListener("input", ()=>{ clearTimeout(t); t = setTimeout(run, 150); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--layout", default=None, help="Keyboard layout (default qwerty)")
    ap.add_argument("--patterns", default=None, help="Builtin patterns: 'all' or 'url,path,...'")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    config = {}
    if args.layout:
        config["keyboard_layout"] = args.layout
    if args.patterns is not None:
        config["enabled_builtin_patterns"] = args.patterns

    global _engine
    try:
        _engine = Engine.from_config(config, verbose=args.verbose)
    except ConfigurationError as exc:
        ap.error(str(exc))

    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
