#!/usr/bin/env python3
from __future__ import annotations

from typing import List, Optional, Tuple

import argparse

import ethcal
from ethcal.core.jdn import jdn_from_gregorian
from ethcal.core.types import GregorianDate


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "ethcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "ethcal[diagnostics]"') from e


def day_of_year(d: GregorianDate) -> int:
    return jdn_from_gregorian(d.year, d.month, d.day) - jdn_from_gregorian(d.year, 1, 1) + 1


def days_since_aug31(d: GregorianDate) -> int:
    """Day of September (Sep 1 = 1); the proleptic drift runs below 1 into August."""
    return jdn_from_gregorian(d.year, d.month, d.day) - jdn_from_gregorian(d.year, 8, 31)


def rolling_median(np, y, win: int = 11):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


def build_series(np, start_year: int, end_year: int, *, metric: str) -> Tuple["np.ndarray", "np.ndarray"]:
    """Ethiopian years and the Gregorian position of their Meskerem 1."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)

    for i, Y in enumerate(years):
        d = ethcal.new_year_day(int(Y))
        if metric == "doy":
            y[i] = float(day_of_year(d))
        elif metric == "sep-day":
            y[i] = float(days_since_aug31(d))
        else:
            raise ValueError("metric must be 'doy' or 'sep-day'")

    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Enkutatash (Meskerem 1) dates across centuries.")
    p.add_argument("--start-year", type=int, default=1000, help="First Ethiopian year.")
    p.add_argument("--end-year", type=int, default=3000, help="Last Ethiopian year.")
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=11, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="enkutatash_scatter", help="Output base name (writes .png)")
    p.add_argument(
        "--metric",
        choices=("sep-day", "doy"),
        default="sep-day",
        help="Y-axis metric (default: day of September).",
    )
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "axes.linewidth": 0.8,
        "xtick.major.width": 0.8,
        "ytick.major.width": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.minorticks_off()

    ax.set_xlabel("Ethiopian year (Amete Mihret)")
    if args.metric == "doy":
        ax.set_ylabel("Gregorian day-of-year (Jan 1 = 1)")
    else:
        ax.set_ylabel("Day of September")
    ax.set_title("Enkutatash in the proleptic Gregorian calendar")

    x, y = build_series(np, args.start_year, args.end_year, metric=args.metric)
    ax.scatter(x.astype(float), y, s=10, marker="o", c="tab:green", linewidths=0.0, alpha=0.45)

    if args.show_trend:
        y_med = rolling_median(np, y, win=int(args.trend_win))
        ax.plot(x, y_med, color="tab:green", linewidth=1.8, alpha=0.95)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
