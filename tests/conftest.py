"""Shared fixtures: build solution trees with executable shell-script solutions."""

from __future__ import annotations

import stat
from pathlib import Path

import pytest


def write_solution(
    root: Path,
    name: str,
    body: str,
    fixtures: dict[str, tuple[str, str | None]] | None = None,
    executable: bool = True,
) -> Path:
    """Create ``root/name`` and ``root/data/<fixture>.in/.out`` files.

    ``fixtures`` maps a fixture name to ``(input, expected)``; an expected value
    of None leaves the ``.out`` file out.
    """
    root.mkdir(parents=True, exist_ok=True)
    path = root / name
    path.write_text(body)
    if executable:
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    if fixtures:
        data = root / "data"
        data.mkdir(exist_ok=True)
        for fixture_name, (given, expected) in fixtures.items():
            (data / f"{fixture_name}.in").write_text(given)
            if expected is not None:
                (data / f"{fixture_name}.out").write_text(expected)
    return path


# Adds the two numbers passed as one space-separated argument.
ADD_SCRIPT = '#!/bin/sh\nset -- $1\necho $(($1 + $2))\n'


@pytest.fixture
def add_solution(tmp_path: Path) -> Path:
    return write_solution(
        tmp_path / "add",
        "solution.sh",
        ADD_SCRIPT,
        {"1": ("2 3\n", "5\n"), "2": ("10 -4", "6")},
    )
