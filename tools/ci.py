#!/usr/bin/env python3
# Copyright 2026 UCDF Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the UCDF CI checks locally and print a colored summary."""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

SAMPLE_LINE = "t=file.csv;c.path=/data/users.csv;s.fields=id:int,name:str;a=r"

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=ucdf", "--cov-report=term-missing"]),
    ("CLI smoke test", ["uv", "run", "ucdf", "validate", SAMPLE_LINE]),
    ("Build", ["uv", "build"]),
]


def main() -> int:
    """Run every step, even after a failure, and return 1 if any failed."""
    root = Path(__file__).resolve().parent.parent
    results: list[tuple[str, bool, float]] = []

    for name, cmd in STEPS:
        _banner(name)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=root)
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    _banner("Summary")
    for name, passed, elapsed in results:
        paint = chalk.green if passed else chalk.red
        print(paint(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}\n{chalk.blue(title)}\n{sep}")


if __name__ == "__main__":
    sys.exit(main())
