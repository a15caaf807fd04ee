#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import jalcal


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "jalcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "jalcal[diagnostics]"') from e


def march_day(engine: str, year: int) -> Optional[int]:
    """Day of March (may exceed 31 / drop below 1 far from the epoch) on which the year starts."""
    jdn = jalcal.jalali_to_jdn(year, 1, 1, engine=engine)
    if jdn is None:
        return None
    gy = year + 621
    return jdn - jalcal.gregorian_to_jdn(gy, 3, 1) + 1


@dataclass(frozen=True)
class Style:
    label: str
    color: str
    marker: str
    size: float = 14.0
    hollow: bool = False


def build_series(np, engine: str, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    xs, ys = [], []
    for Y in range(start_year, end_year + 1):
        d = march_day(engine, Y)
        if d is not None:
            xs.append(Y)
            ys.append(float(d))
    return np.asarray(xs, dtype=int), np.asarray(ys, dtype=float)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Nowruz dates (day of March) across Jalali engines.")
    p.add_argument("--start-year", type=int, default=1200)
    p.add_argument("--end-year", type=int, default=1700)
    p.add_argument("--outbase", default="nowruz_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    styles: Dict[str, Style] = {
        "arithmetic": Style("33-year arithmetic", "tab:blue", "o", size=12),
        "borkowski":  Style("Borkowski table", "tab:red", "o", size=22, hollow=True),
    }

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.set_xlabel("Jalali year")
    ax.set_ylabel("Nowruz, day of March")
    ax.set_title("Nowruz across Jalali leap-year engines")

    for eng, st in styles.items():
        x, y = build_series(np, eng, args.start_year, args.end_year)
        if st.hollow:
            ax.scatter(x, y, s=st.size, marker=st.marker, facecolors="none",
                       edgecolors=st.color, linewidths=1.0, alpha=0.6, label=st.label)
        else:
            ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color, alpha=0.35, label=st.label)

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
