"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src and project root directories to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    for import_path in (project_root / "src", project_root):
        if str(import_path) not in sys.path:
            sys.path.insert(0, str(import_path))


@pytest.fixture
def scenario_archive(tmp_path: Path) -> Path:
    """Archive with the Alpha/Beta three-row scenario."""
    from tests.fixture_paths import scenario_lines, write_policy_archive

    return write_policy_archive(tmp_path / "FL_insurance.csv.zip", scenario_lines())
