#!/usr/bin/env python3
from __future__ import annotations
import argparse, os, sys
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd
import matplotlib
# Non-interactive backend unless the caller picked one
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

TRACE_COLUMNS = ["iteration","frontier","heuristic","depth"]

def load_traces(paths) -> pd.DataFrame:
    """Concatenate trace CSVs, tagging each row with its file stem as `run`."""
    frames = []
    for p in paths:
        p = Path(p)
        df = pd.read_csv(p)
        missing = [c for c in TRACE_COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(f"{p}: missing trace columns {missing}")
        df = df[TRACE_COLUMNS].copy()
        df["run"] = p.stem
        frames.append(df)
    if not frames:
        return pd.DataFrame(columns=TRACE_COLUMNS + ["run"])
    return pd.concat(frames, ignore_index=True)

def plot_traces(df: pd.DataFrame, outdir: Path, name: str) -> Path:
    """Frontier size (with running peak) and selected heuristic vs iteration, one line per run."""
    fig, (ax_f, ax_h) = plt.subplots(1, 2, figsize=(12, 5))
    for run, g in df.groupby("run", sort=True):
        g = g.sort_values("iteration")
        xs = g["iteration"].to_numpy()
        frontier = g["frontier"].to_numpy()
        line, = ax_f.plot(xs, frontier, label=run)
        ax_f.plot(xs, np.maximum.accumulate(frontier), linestyle="--", color=line.get_color(), alpha=0.6)
        ax_h.step(xs, g["heuristic"].to_numpy(), where="post", label=run)
    ax_f.set_xlabel("Iteration"); ax_f.set_ylabel("Frontier size")
    ax_f.set_title("Frontier size (dashed: running peak)")
    ax_h.set_xlabel("Iteration"); ax_h.set_ylabel("Heuristic of selected node")
    ax_h.set_title("Selected heuristic")
    for ax in (ax_f, ax_h):
        ax.grid(True)
        ax.legend()
    plt.tight_layout()
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    print(f"Saved: {path}")
    return path

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    return df.groupby("run").agg(
        iterations=("iteration", "max"),
        peak_frontier=("frontier", "max"),
        min_heuristic=("heuristic", "min"),
        max_depth=("depth", "max"),
    )

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Plot search trace CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more trace CSV files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    args = ap.parse_args(argv)

    df = load_traces(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        return 0

    print(summarize(df).to_string())
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem
    plot_traces(df, Path(args.save), f"{base}_trace")
    return 0

if __name__ == "__main__":
    sys.exit(main())
