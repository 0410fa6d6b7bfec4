from __future__ import annotations

import argparse

import ethcal
from ethcal.core.types import GregorianDate


def mmdd(d: GregorianDate) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def new_year_rows(Y0: int, Y1: int, *, names: str = "amharic") -> list[tuple[int, GregorianDate, str]]:
    """(Ethiopian year, Gregorian date of Meskerem 1, weekday name) for Y0..Y1."""
    rows = []
    for Y in range(Y0, Y1 + 1):
        d = ethcal.new_year_day(Y)
        rows.append((Y, d, ethcal.weekday_name(d, names=names)))
    return rows


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print Enkutatash (Meskerem 1) dates per Ethiopian year.")
    p.add_argument("--from-year", type=int, default=2010)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument("--names", default="amharic", help="Weekday name table.")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Gregorian column (default: iso).",
    )
    p.add_argument(
        "--list-day",
        type=int,
        default=12,
        help="After the table, list the years whose New Year falls on this September day (default: 12).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    def fmt(d: GregorianDate) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    rows = new_year_rows(Y0, Y1, names=args.names)

    headers = ["Year", "Gregorian", "Weekday"]
    colw = [6, 11, 8]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))
    for Y, d, wd in rows:
        print("  ".join(s.ljust(w) for s, w in zip((str(Y), fmt(d), wd), colw)))

    hits = [(Y, d) for Y, d, _ in rows if d.month == 9 and d.day == args.list_day]
    print(f"\nNew Year on September {args.list_day}:")
    if not hits:
        print("(none)")
        return 0
    for Y, d in hits:
        print(f"{d.isoformat()}  (Y={Y}, leap {Y - 1} = {ethcal.is_ethiopian_leap(Y - 1)})")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
