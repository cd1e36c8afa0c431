#!/usr/bin/env python3
"""
Run the CI checks locally inside the ACTIVE virtual environment.

Steps:
  1) uv sync --all-extras (--frozen when uv.lock exists)
  2) black --check on namelang/, scripts/ and tests/ (line length 120)
  3) mypy namelang
  4) pytest tests/ with coverage, PYTHONPATH=<repo root>
  5) smoke-run scripts/guess_language.py against every bundled name type
"""

from __future__ import annotations

import os
import sys
import shutil
import subprocess
from pathlib import Path

BLACK_VERSION = "24.8.0"
LINE_LENGTH = "120"
SMOKE_WORDS = ["Schwarzenegger", "Kowalczyk", "Smith"]


def repo_root() -> Path:
    here = Path(__file__).resolve().parent
    for d in [here] + list(here.parents):
        if (d / "pyproject.toml").exists():
            return d
    return here


REPO = repo_root()


def uv_command() -> list[str]:
    found = shutil.which("uv")
    if found:
        return [found]
    return [sys.executable, "-m", "uv"]


def run(cmd: list[str], *, env: dict[str, str] | None = None) -> None:
    print(">>>", " ".join(cmd))
    subprocess.run(cmd, check=True, cwd=str(REPO), env=env)


def repo_env() -> dict[str, str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO)
    return env


def main() -> None:
    uv = uv_command()

    sync_args = ["sync", "--active", "--all-extras"]
    if (REPO / "uv.lock").exists():
        sync_args.append("--frozen")
    run(uv + sync_args)

    if shutil.which("uvx"):
        black = ["uvx", "--from", f"black=={BLACK_VERSION}", "black"]
    else:
        black = uv + ["run", "--active", "black"]
    run(black + ["namelang", "scripts", "tests", "--check", "--line-length", LINE_LENGTH])

    run(uv + ["run", "--active", "mypy", "namelang", "--ignore-missing-imports"])

    run(
        uv + ["run", "--active", "pytest", "tests/", "--cov=namelang", "--cov-report=term-missing"],
        env=repo_env(),
    )

    for name_type in ("ash", "gen", "sep"):
        run(
            uv + ["run", "--active", "python", "scripts/guess_language.py", "--name_type", name_type, *SMOKE_WORDS],
            env=repo_env(),
        )

    print("\nALL CHECKS PASSED")


if __name__ == "__main__":
    try:
        main()
    except subprocess.CalledProcessError as e:
        print(f"\nCommand failed with exit code {e.returncode}", file=sys.stderr)
        sys.exit(e.returncode)
