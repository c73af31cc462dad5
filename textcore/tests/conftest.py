"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path
from typing import Dict

import pytest


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def golden_dir(fixtures_dir: Path) -> Path:
    """Return path to golden files directory."""
    return fixtures_dir / "golden"


@pytest.fixture
def sample_names(fixtures_dir: Path) -> str:
    """Raw pasted name list, one person per line."""
    return (fixtures_dir / "names.txt").read_text(encoding="utf-8")


@pytest.fixture
def sample_phones(fixtures_dir: Path) -> str:
    """Raw pasted phone list, one number per line."""
    return (fixtures_dir / "phones.txt").read_text(encoding="utf-8")


@pytest.fixture
def load_golden(golden_dir: Path):
    """Return a loader for golden files by test name."""

    def _load(name: str) -> Dict:
        with open(golden_dir / f"{name}.json", encoding="utf-8") as f:
            return json.load(f)

    return _load


@pytest.fixture
def rules_file(tmp_path: Path):
    """Write a rules.yaml into tmp_path and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "rules.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
