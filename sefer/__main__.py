from __future__ import annotations
import argparse
import json
from dataclasses import asdict

from .chain import build_chain, find_cycle
from .config import DEFAULT_CHAIN_STEPS, DEFAULT_SPELLING_DEPTH, HOST, PORT
from .gematria import compute_value
from .milouy import expand_spelling, full_spelling, spelling_table
from .numbers import Gender, number_name, parse_gender
from .ranges import generate_range, normalize_range

def _dump(obj) -> None:
    print(json.dumps(obj, ensure_ascii=False, indent=2))

def _gender(value: str) -> Gender:
    try:
        return parse_gender(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))

def cmd_gematria(args: argparse.Namespace) -> int:
    text = " ".join(args.text)
    value = compute_value(text)
    if args.json:
        _dump({"text": text, "gematria": value})
        return 0
    print(f"{text}  =>  {value}")
    return 0

def cmd_name(args: argparse.Namespace) -> int:
    nn = number_name(args.n, args.gender)
    if args.json:
        _dump({"number": nn.number, "gender": nn.gender.value, "name": nn.text, "gematria": nn.gematria})
        return 0
    print(f"{nn.number} ({nn.gender.value}): {nn.text}  =>  {nn.gematria}")
    return 0

def cmd_range(args: argparse.Namespace) -> int:
    lo, hi = normalize_range(args.min, args.max)
    if (lo, hi) != (args.min, args.max):
        print(f"[range] adjusted to {lo}..{hi}", flush=True)
    entries = generate_range(lo, hi, fixed_points_only=args.fixed_only)
    if args.json:
        _dump([dict(asdict(e), is_fixed_point=e.is_fixed_point) for e in entries])
        return 0

    if not entries:
        print("No matches.")
        return 0

    for e in entries:
        mark = " *" if e.is_fixed_point else ""
        print(f"{e.number}{mark}")
        print(f"  {e.masculine}  =>  {e.masculine_gematria}")
        print(f"  {e.feminine}  =>  {e.feminine_gematria}")
    return 0

def cmd_milouy(args: argparse.Namespace) -> int:
    if args.letter:
        spelled = full_spelling(args.letter)
        if args.json:
            _dump({"letter": args.letter, "full_spelling": spelled, "gematria": compute_value(spelled)})
            return 0
        print(f"{args.letter}: {spelled}  =>  {compute_value(spelled)}")
        return 0

    table = spelling_table()
    if args.json:
        _dump([asdict(e) for e in table])
        return 0
    for e in table:
        print(f"{e.letter}  {e.full_spelling}  =>  {e.gematria}")
    return 0

def cmd_expand(args: argparse.Namespace) -> int:
    steps = expand_spelling(args.seed, args.depth)
    if args.json:
        _dump([asdict(s) for s in steps])
        return 0
    for s in steps:
        print(f"[{s.depth}] gematria={s.gematria} letters={len(s.distinct_letters)} ({' '.join(s.distinct_letters)})")
        print(f"  {s.text}")
    return 0

def cmd_chain(args: argparse.Namespace) -> int:
    steps = build_chain(args.seed, args.gender, args.steps)
    cycle = find_cycle(steps)
    if args.json:
        _dump({"steps": [asdict(s) for s in steps], "cycle": asdict(cycle) if cycle else None})
        return 0

    if not steps:
        print("Nothing to show.")
        return 0

    for s in steps:
        seen = f"  (seen at step {s.first_occurrence})" if s.first_occurrence else ""
        print(f"{s.step_index}. {s.number}: {s.name}  =>  {s.gematria}{seen}")
    if cycle:
        print(f"cycle from step {cycle.start_index}, length {cycle.length}: {' -> '.join(map(str, cycle.numbers))}")
    return 0

def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn
    uvicorn.run(
        "sefer.api:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )
    return 0

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="sefer", description="ס.פ.ר: Hebrew gematria, number names and name chains")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_g = sub.add_parser("gematria", help="Gematria of a Hebrew text")
    p_g.add_argument("text", nargs="+", help="Hebrew text")
    p_g.add_argument("--json", action="store_true", help="Output JSON")
    p_g.set_defaults(func=cmd_gematria)

    p_n = sub.add_parser("name", help="Hebrew name of a number")
    p_n.add_argument("n", type=int)
    p_n.add_argument("--gender", type=_gender, default=Gender.MASCULINE, help="masculine|feminine (m/f)")
    p_n.add_argument("--json", action="store_true", help="Output JSON")
    p_n.set_defaults(func=cmd_name)

    p_r = sub.add_parser("range", help="Names and gematria for a range of numbers")
    p_r.add_argument("min", type=int)
    p_r.add_argument("max", type=int)
    p_r.add_argument("--fixed-only", action="store_true", dest="fixed_only", help="Only numbers equal to their name's gematria")
    p_r.add_argument("--json", action="store_true", help="Output JSON")
    p_r.set_defaults(func=cmd_range)

    p_m = sub.add_parser("milouy", help="Full spelling of a letter (or the whole table)")
    p_m.add_argument("letter", nargs="?", default=None)
    p_m.add_argument("--json", action="store_true", help="Output JSON")
    p_m.set_defaults(func=cmd_milouy)

    p_e = sub.add_parser("expand", help="Recursive letter-name expansion")
    p_e.add_argument("seed")
    p_e.add_argument("--depth", type=int, default=DEFAULT_SPELLING_DEPTH, help="Depth (1..10, clamped)")
    p_e.add_argument("--json", action="store_true", help="Output JSON")
    p_e.set_defaults(func=cmd_expand)

    p_c = sub.add_parser("chain", help="number -> name -> gematria chain")
    p_c.add_argument("seed")
    p_c.add_argument("--gender", type=_gender, default=Gender.MASCULINE, help="masculine|feminine (m/f)")
    p_c.add_argument("--steps", type=int, default=DEFAULT_CHAIN_STEPS, help="Number of steps (1..100, clamped)")
    p_c.add_argument("--json", action="store_true", help="Output JSON")
    p_c.set_defaults(func=cmd_chain)

    p_srv = sub.add_parser("serve", help="Run FastAPI server")
    p_srv.add_argument("--host", default=HOST)
    p_srv.add_argument("--port", type=int, default=PORT)
    p_srv.add_argument("--reload", action="store_true")
    p_srv.set_defaults(func=cmd_serve)

    return p

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)

if __name__ == "__main__":
    raise SystemExit(main())
