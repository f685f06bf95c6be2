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
    run("python -m src.experiments.runner --n 3 --depths 4 8 12 16 20 --per_depth 30 --include_unsolvable --out results/p8_survey.csv")
    run("python -m src.experiments.runner --n 4 --depths 4 8 12 16 20 --per_depth 30 --include_unsolvable --out results/p15_survey.csv")
    run("python -m src.experiments.analyze results/p8_survey.csv results/p15_survey.csv --out results/survey_summary.csv")
    run("python -m src.experiments.plot results/p8_survey.csv results/p15_survey.csv --save results/plots")

if __name__ == "__main__":
    main()
