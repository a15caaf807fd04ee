from __future__ import annotations

import argparse
import importlib
import inspect
import re
import sys


_DATE_RE = re.compile(r"^[0-9۰-۹٠-٩]{1,4}-[0-9۰-۹٠-٩]{1,2}-[0-9۰-۹٠-٩]{1,2}$")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _print_or_fail(out: str | None, what: str) -> int:
    if out is None:
        print(f"invalid {what}", file=sys.stderr)
        return 2
    print(out)
    return 0


def cmd_g2j(argv: list[str]) -> int:
    import jalcal

    p = argparse.ArgumentParser(prog="jalcal g2j", description="Gregorian -> Jalali")
    p.add_argument("date", help="Y-M-D (Latin, Persian or Arabic-Indic digits)")
    p.add_argument("--sep", default="-", help="field separator (default: -)")
    p.add_argument("--engine", default="arithmetic")
    p.add_argument("--digits", choices=("latin", "persian", "arabic"), default="latin")
    args = p.parse_args(argv)

    fields = jalcal.parse_date_fields(args.date, args.sep)
    out = jalcal.gregorian_to_jalali(*fields, engine=args.engine) if fields else None
    return _print_or_fail(
        jalcal.format_date(*out, args.sep, digits=args.digits) if out else None,
        f"Gregorian date: {args.date}",
    )


def cmd_j2g(argv: list[str]) -> int:
    import jalcal

    p = argparse.ArgumentParser(prog="jalcal j2g", description="Jalali -> Gregorian")
    p.add_argument("date", help="Y-M-D (Latin, Persian or Arabic-Indic digits)")
    p.add_argument("--sep", default="-", help="field separator (default: -)")
    p.add_argument("--engine", default="arithmetic")
    p.add_argument("--digits", choices=("latin", "persian", "arabic"), default="latin")
    args = p.parse_args(argv)

    fields = jalcal.parse_date_fields(args.date, args.sep)
    out = jalcal.jalali_to_gregorian(*fields, engine=args.engine) if fields else None
    return _print_or_fail(
        jalcal.format_date(*out, args.sep, digits=args.digits) if out else None,
        f"Jalali date: {args.date}",
    )


def cmd_unix(argv: list[str]) -> int:
    import jalcal
    from jalcal.core.types import CalendarDate

    p = argparse.ArgumentParser(prog="jalcal unix", description="Unix timestamp -> Jalali and Gregorian day (UTC)")
    p.add_argument("timestamp", type=int)
    p.add_argument("--engine", default="arithmetic")
    args = p.parse_args(argv)

    j = jalcal.unix_to_jalali(args.timestamp, engine=args.engine)
    g = jalcal.unix_to_gregorian(args.timestamp)
    if j is None or g is None:
        print(f"invalid timestamp: {args.timestamp}", file=sys.stderr)
        return 2
    print(f"Jalali    : {CalendarDate(*j)}")
    print(f"Gregorian : {CalendarDate(*g)}")
    return 0


def cmd_to_unix(argv: list[str]) -> int:
    import jalcal

    p = argparse.ArgumentParser(prog="jalcal to-unix", description="Jalali date -> Unix timestamp at UTC midnight")
    p.add_argument("date", help="Y-M-D (Latin, Persian or Arabic-Indic digits)")
    p.add_argument("--sep", default="-")
    p.add_argument("--engine", default="arithmetic")
    args = p.parse_args(argv)

    fields = jalcal.parse_date_fields(args.date, args.sep)
    ts = jalcal.jalali_to_unix(*fields, engine=args.engine) if fields else None
    return _print_or_fail(None if ts is None else str(ts), f"Jalali date: {args.date}")


def cmd_engines(argv: list[str]) -> int:
    import jalcal

    p = argparse.ArgumentParser(prog="jalcal engines", description="List registered engines")
    p.parse_args(argv)
    for name in jalcal.list_engines():
        info = jalcal.engine_info(name)
        print(f"{name:12s} {info}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `jalcal YYYY-MM-DD` converts Gregorian -> Jalali
    if argv and _DATE_RE.match(argv[0]):
        return cmd_g2j(argv)

    p = argparse.ArgumentParser(prog="jalcal", description="Gregorian/Jalali calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("g2j", help="Gregorian -> Jalali")
    sub.add_parser("j2g", help="Jalali -> Gregorian")
    sub.add_parser("unix", help="Unix timestamp -> Jalali/Gregorian day")
    sub.add_parser("to-unix", help="Jalali date -> Unix timestamp")
    sub.add_parser("engines", help="List registered engines")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "nowruz-table", "nowruz-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    commands = {
        "g2j": cmd_g2j,
        "j2g": cmd_j2g,
        "unix": cmd_unix,
        "to-unix": cmd_to_unix,
        "engines": cmd_engines,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "jalcal.diagnostics.round_trip",
            "nowruz-table": "jalcal.diagnostics.nowruz_table",
            "nowruz-scatter": "jalcal.diagnostics.nowruz_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
