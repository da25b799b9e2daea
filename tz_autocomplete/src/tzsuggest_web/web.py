from __future__ import annotations
import argparse
from dataclasses import asdict
from flask import Flask, request, jsonify, Response
from tzsuggest.engine import Engine
from tzsuggest.config import TOP_K
from tzsuggest.interaction import respond

app = Flask(__name__)
_engine: Engine | None = None

def _get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = Engine().build()
    return _engine

# ---------- API ----------
@app.get("/api/complete")
def api_complete():
    q = request.args.get("q", None, type=str)
    k = request.args.get("k", TOP_K, type=int)
    if q is None:
        return jsonify([])
    rows = _get_engine().complete(q, top_k=k)
    return jsonify([asdict(r) for r in rows])

@app.post("/api/interactions")
def api_interactions():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({"error": "expected a JSON object"}), 400
    return jsonify(respond(payload, _get_engine()))

@app.get("/health")
def health():
    return jsonify({"ok": True, "candidates": len(_get_engine())})

# ---------- UI ----------
@app.get("/")
def home():
    # Tiny page: one input, results list, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Timezone autocomplete</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:720px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
input{ width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px; }
input:focus{ border-color:var(--accent) }
.row{ display:grid; grid-template-columns:3rem 5rem 1fr; gap:10px; padding:8px 4px; border-top:1px solid var(--border); }
.small{ color:var(--muted); font-variant-numeric:tabular-nums }
.empty{ padding:16px; text-align:center; color:var(--muted); }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Timezone autocomplete</h1>
      <input id="q" type="text" placeholder="e.g. Europe/Par" autocomplete="off" autofocus />
      <div id="out" class="empty">Start typing to see timezones.</div>
    </div>
  </div>
<script>
const q = document.querySelector("#q"), out = document.querySelector("#out");
let t;
async function search(){
  const resp = await fetch(`/api/complete?q=${encodeURIComponent(q.value)}&k=10`);
  const data = await resp.json();
  if(!data.length){ out.className = "empty"; out.textContent = "No matches."; return; }
  out.className = "";
  out.innerHTML = data.map(r => `
    <div class="row"><div class="small">${r.rank}</div>
    <div class="small">${r.score.toFixed(3)}</div><div>${r.name}</div></div>`).join("");
}
q.addEventListener("input", () => { clearTimeout(t); t = setTimeout(search, 150); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI/API on top of Engine")
    ap.add_argument("--names", default=None, help="File with one candidate name per line (default: IANA timezones)")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine().build(names_file=args.names, verbose=args.verbose)
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
