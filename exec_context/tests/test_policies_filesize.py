"""Policy test: enforce <=500 LOC per source file.

Guards the rule that no single source file should exceed 500 lines so
modules stay focused. Counting includes docstrings and comments, which is
acceptable for this coarse policy.
"""

from __future__ import annotations

from pathlib import Path

import pytest

MAX_LOC = 500


def test_source_files_line_count_budget() -> None:
    """Fail if any package source file exceeds the MAX_LOC budget.

    Skips tests and dunders.
    """
    pkg = Path(__file__).resolve().parents[1]
    root = pkg.parent
    offenders: list[tuple[str, int]] = []
    for p in pkg.rglob("*.py"):
        rel = p.relative_to(root).as_posix()
        if "/tests/" in rel or p.name == "__init__.py":
            continue
        with p.open("r", encoding="utf-8") as fh:
            loc = sum(1 for _ in fh)
        if loc > MAX_LOC:
            offenders.append((rel, loc))

    if offenders:
        pytest.fail(f"Files over {MAX_LOC} LOC: {offenders}")
