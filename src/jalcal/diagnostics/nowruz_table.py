from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import jalcal


DEFAULT_ENGINES: List[Tuple[str, str]] = [
    ("Arithmetic", "arithmetic"),
    ("Borkowski", "borkowski"),
]


def mmdd(d: Optional[Tuple[int, int, int]]) -> str:
    if d is None:
        return "--"
    return f"{d[1]:02d}-{d[2]:02d}"


def parse_engines(arg: str) -> List[Tuple[str, str]]:
    """
    Parse engine list from CLI.
    Example:
      --engines "Arith=arithmetic,Bork=borkowski"
    If you pass just engines, names will be capitalized engines:
      --engines "arithmetic,borkowski"
    """
    items = [x.strip() for x in arg.split(",") if x.strip()]
    out: List[Tuple[str, str]] = []
    for it in items:
        if "=" in it:
            name, eng = it.split("=", 1)
            out.append((name.strip(), eng.strip()))
        else:
            out.append((it.capitalize(), it))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print Nowruz (1 Farvardin) Gregorian dates for several Jalali engines.")
    p.add_argument("--from-year", type=int, default=1390)
    p.add_argument("--to-year", type=int, default=1420)
    p.add_argument("--engines", type=str, default="", help='Comma list like "Arith=arithmetic,Bork=borkowski".')
    p.add_argument("--only-diff", action="store_true", help="Only print years where the engines disagree.")
    args = p.parse_args(argv)

    engines = parse_engines(args.engines) if args.engines else DEFAULT_ENGINES

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year"] + [name for name, _ in engines] + ["Leap"]
    colw = [5] + [max(6, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    n_diff = 0
    for Y in range(Y0, Y1 + 1):
        dates = [jalcal.nowruz(Y, engine=eng) for _, eng in engines]
        leaps = ["L" if jalcal.is_jalali_leap_year(Y, engine=eng) else "." for _, eng in engines]
        differs = len(set(dates)) > 1 or len(set(leaps)) > 1
        n_diff += differs
        if args.only_diff and not differs:
            continue
        row = [str(Y).ljust(colw[0])]
        row += [mmdd(d).ljust(w) for d, w in zip(dates, colw[1:])]
        row.append("".join(leaps) + ("  *" if differs else ""))
        print("  ".join(row))

    print(f"\nYears where engines disagree: {n_diff}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
