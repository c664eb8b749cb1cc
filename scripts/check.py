#!/usr/bin/env python3
"""Type check and test the circular package (local and CI)."""

from __future__ import annotations

import argparse
import os
import subprocess
from pathlib import Path

COVERAGE_FLOOR = 90

STEPS: dict[str, list[str]] = {
    "typecheck": ["uv", "run", "mypy"],
    "tests": [
        "uv",
        "run",
        "pytest",
        "tests/circular",
        "--cov=circular",
        "--cov-report=term-missing",
        f"--cov-fail-under={COVERAGE_FLOOR}",
    ],
}


def main() -> int:
    parser = argparse.ArgumentParser(description="Run repository quality checks.")
    parser.add_argument("--only", choices=sorted(STEPS), action="append", help="run just these steps")
    args = parser.parse_args()

    os.chdir(Path(__file__).resolve().parents[1])
    env = {**os.environ, "PYTHONPATH": "."}

    for name in args.only or list(STEPS):
        print(f"[check] {name}", flush=True)
        returncode = subprocess.run(STEPS[name], env=env, check=False).returncode
        if returncode != 0:
            raise SystemExit(f"{name} failed with exit code {returncode}.")

    print("[check] ok")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
