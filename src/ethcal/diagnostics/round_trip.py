from __future__ import annotations

import argparse
import random
from typing import Iterable, List, Tuple

from ethcal.core.jdn import ethiopian_from_jdn, gregorian_from_jdn, jdn_from_ethiopian, jdn_from_gregorian

Failure = Tuple[str, int, object, int]  # (direction, jdn_in, date, jdn_out)


def check_jdn(jdn: int) -> List[Failure]:
    """Send one JDN through both calendars and back."""
    out: List[Failure] = []

    g = gregorian_from_jdn(jdn)
    back = jdn_from_gregorian(g.year, g.month, g.day)
    if back != jdn:
        out.append(("gregorian", jdn, g, back))

    e = ethiopian_from_jdn(jdn)
    back = jdn_from_ethiopian(e.year, e.month, e.day, e.era)
    if back != jdn:
        out.append(("ethiopian", jdn, e, back))

    return out


def sweep(jdns: Iterable[int], *, max_failures: int = 0) -> List[Failure]:
    """Check every JDN; stop early once ``max_failures`` (if > 0) are found."""
    failures: List[Failure] = []
    for jdn in jdns:
        failures.extend(check_jdn(jdn))
        if max_failures and len(failures) >= max_failures:
            break
    return failures


def random_jdns(start: int, end: int, N: int, seed: int) -> List[int]:
    rng = random.Random(seed)
    return [rng.randint(start, end) for _ in range(N)]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip tests: JDN -> Gregorian/Ethiopian -> JDN.")
    p.add_argument("--start-year", type=int, default=1, help="First Gregorian year.")
    p.add_argument("--end-year", type=int, default=3000, help="Last Gregorian year.")
    p.add_argument("--N", type=int, default=20000, help="Random trials (ignored with --exhaustive).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--exhaustive", action="store_true", help="Check every day in the range.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    start = jdn_from_gregorian(args.start_year, 1, 1)
    end = jdn_from_gregorian(args.end_year, 12, 31)
    jdns = range(start, end + 1) if args.exhaustive else random_jdns(start, end, args.N, args.seed)

    failures = sweep(jdns, max_failures=args.max_failures)
    for direction, jdn_in, d, jdn_out in failures:
        print(f"FAIL ({direction}) jdn={jdn_in} -> {d} -> {jdn_out}")

    if not failures:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {len(failures)}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
