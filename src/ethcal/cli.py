from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from .core.errors import EthcalError
from .core.types import Era


_DATE_RE = re.compile(r"^\d{1,5}-\d{1,2}-\d{1,2}$")

_ERA_CHOICES = {
    "amete-mihret": Era.AMETE_MIHRET,
    "amete-alem": Era.AMETE_ALEM,
    "coptic": Era.COPTIC,
}


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


def _era(name: str | None) -> Era | None:
    return None if name is None else _ERA_CHOICES[name]


def cmd_to_gregorian(argv: list[str]) -> int:
    import ethcal

    p = argparse.ArgumentParser(prog="ethcal to-gregorian", description="Ethiopian -> Gregorian date")
    p.add_argument("date", help="YEAR-MONTH-DAY (Ethiopian)")
    p.add_argument("--era", choices=sorted(_ERA_CHOICES), default=None,
                   help="Era of the year (default: by year sign)")
    args = p.parse_args(argv)

    e = ethcal.parse_ethiopian(args.date, era=_era(args.era))
    print(ethcal.to_gregorian(e).isoformat())
    return 0


def cmd_to_ethiopian(argv: list[str]) -> int:
    import ethcal

    p = argparse.ArgumentParser(prog="ethcal to-ethiopian", description="Gregorian -> Ethiopian date")
    p.add_argument("date", help="YEAR-MM-DD (proleptic Gregorian)")
    p.add_argument("--names", default="amharic", help=f"name table ({', '.join(ethcal.list_names())})")
    p.add_argument("--format", choices=("long", "iso"), default="long")
    p.add_argument("--era", choices=sorted(_ERA_CHOICES), default=None,
                   help="Force the era of the result (default: by date)")
    args = p.parse_args(argv)

    e = ethcal.to_ethiopian(ethcal.parse_gregorian(args.date), era=_era(args.era))
    if args.format == "iso":
        print(ethcal.format_ethiopian_iso(e))
    else:
        print(ethcal.format_ethiopian_date(e, args.names))
    return 0


def cmd_day(argv: list[str]) -> int:
    import ethcal

    p = argparse.ArgumentParser(prog="ethcal day", description="Gregorian -> Ethiopian day record")
    p.add_argument("date", help="YEAR-MM-DD")
    p.add_argument("--attr", action="append", default=[],
                   help=f"attribute name (repeatable): {', '.join(ethcal.list_attributes())}")
    args = p.parse_args(argv)

    info = ethcal.day_info(ethcal.parse_gregorian(args.date), attributes=tuple(args.attr))
    print(info)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `ethcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + argv

    p = argparse.ArgumentParser(prog="ethcal", description="Ethiopian / Gregorian calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-gregorian", help="Ethiopian -> Gregorian date", add_help=False)
    sub.add_parser("to-ethiopian", help="Gregorian -> Ethiopian date", add_help=False)
    sub.add_parser("day", help="Gregorian -> Ethiopian day record", add_help=False)

    # diagnostics
    sub.add_parser("round-trip", help="Round-trip sweep through both calendars", add_help=False)
    sub.add_parser("new-years", help="Print Enkutatash (Meskerem 1) table", add_help=False)
    sub.add_parser("new-year-scatter", help="Plot Enkutatash dates across centuries", add_help=False)
    sub.add_parser("pretty-month", help="Print an Ethiopian month as a weekly grid", add_help=False)

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "to-gregorian": cmd_to_gregorian,
        "to-ethiopian": cmd_to_ethiopian,
        "day": cmd_day,
    }
    tool_map = {
        "round-trip": "ethcal.diagnostics.round_trip",
        "new-years": "ethcal.diagnostics.new_years_table",
        "new-year-scatter": "ethcal.diagnostics.new_year_scatter",
        "pretty-month": "ethcal.diagnostics.pretty_month",
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)
        if args.cmd in tool_map:
            return _run_module_main(tool_map[args.cmd], rest)
    except EthcalError as e:
        print(f"ethcal: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
