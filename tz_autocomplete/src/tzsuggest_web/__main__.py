from __future__ import annotations
import argparse, sys, json
from dataclasses import asdict
from tzsuggest.engine import Engine
from tzsuggest.config import TOP_K

def _print_table(rows) -> None:
    if not rows:
        print("(no matches)"); return
    print("#   Score   Timezone")
    for r in rows:
        print(f"{r.rank:<3} {r.score:<7.4f} {r.name}")

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Timezone autocomplete CLI (Engine-backed)")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("-k", type=int, default=TOP_K, help="Top-K results")
    p.add_argument("--names", default=None, help="File with one candidate name per line (default: IANA timezones)")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--serve", action="store_true", help="Run the Flask UI/API instead")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.serve:
        from . import web
        web_argv = ["--host", args.host, "--port", str(args.port)]
        if args.names:
            web_argv += ["--names", args.names]
        if args.verbose:
            web_argv.append("--verbose")
        return web.main(web_argv)

    if args.q is None and not args.repl:
        p.error("nothing to do: pass --q, --repl or --serve")

    eng = Engine()
    try:
        eng.build(names_file=args.names, verbose=args.verbose)

        def run_query(q: str) -> None:
            rows = eng.complete(q, top_k=args.k)
            if args.json:
                print(json.dumps([asdict(r) for r in rows], ensure_ascii=False, indent=2))
            else:
                _print_table(rows)

        if args.q is not None:
            run_query(args.q)

        if args.repl:
            print("Type a partial timezone (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    print(); break
                if not q:
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    sys.exit(main())
