from __future__ import annotations

import argparse

import ethcal
from ethcal.core.jdn import ethiopian_from_jdn, gregorian_from_jdn, jdn_from_ethiopian, jdn_from_gregorian
from ethcal.core.leap import ethiopian_month_length, gregorian_month_lengths
from ethcal.core.types import GregorianDate


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def layout_weeks(first_jdn: int, cells: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    """Lay day cells out Monday-first, starting at the weekday of ``first_jdn``."""
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = first_jdn % 7  # JDN 0 is a Monday
    for _ in range(pad):
        wk.append(cell("", ""))
    for top, bot in cells:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def ethiopian_month_grid(Y: int, M: int, names: str = "amharic") -> tuple[str, list[list[tuple[str, str]]]]:
    first = ethcal.EthiopianDate(Y, M, 1)
    j0 = jdn_from_ethiopian(first.year, first.month, 1, first.era)
    cells = []
    for i in range(ethiopian_month_length(Y, M)):
        g = gregorian_from_jdn(j0 + i)
        cells.append((f"{i + 1:2d}", f"{g.month:02d}-{g.day:02d}"))
    month_name = ethcal.get_names(names).months[M]
    title = f"Ethiopian month  {month_name} {Y}  (M={M}, {first.era.name})"
    return title, layout_weeks(j0, cells)


def gregorian_month_grid(gy: int, gm: int) -> tuple[str, list[list[tuple[str, str]]]]:
    first = GregorianDate(gy, gm, 1)
    j0 = jdn_from_gregorian(first.year, first.month, first.day)
    cells = []
    for i in range(gregorian_month_lengths(gy)[gm - 1]):
        e = ethiopian_from_jdn(j0 + i)
        cells.append((f"{i + 1:2d}", f"{e.month:02d}-{e.day:02d}"))
    title = f"Gregorian month  {gy}-{gm:02d}"
    return title, layout_weeks(j0, cells)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print an Ethiopian-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--eth", nargs=2, type=int, metavar=("Y", "M"),
                   help="Ethiopian month to print: Y M (e.g. 2017 13)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 9)")
    p.add_argument("--names", default="amharic", help="Month name table for titles.")
    args = p.parse_args(argv)

    if not args.eth and not args.greg:
        # sensible default demo: Pagume and the September it falls in
        print_grid(*ethiopian_month_grid(2017, 13, args.names))
        print_grid(*gregorian_month_grid(2025, 9))
        return 0

    if args.eth:
        Y, M = args.eth
        print_grid(*ethiopian_month_grid(Y, M, args.names))

    if args.greg:
        gy, gm = args.greg
        print_grid(*gregorian_month_grid(gy, gm))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
