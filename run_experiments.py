#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("python -m eightpuzzle.experiments.runner --tie_break lifo --out results/runs.csv --trace_out results/trace_lifo.csv")
    run("python -m eightpuzzle.experiments.runner --tie_break fifo --out results/runs.csv --trace_out results/trace_fifo.csv")
    run("python -m eightpuzzle.experiments.runner --start 2 8 3 1 6 4 7 0 5 --visited --max_iterations 50000 "
        "--out results/runs.csv --trace_out results/trace_visited.csv")
    run("python -m eightpuzzle.experiments.plot results/trace_lifo.csv results/trace_fifo.csv results/trace_visited.csv")

if __name__ == "__main__":
    main()
