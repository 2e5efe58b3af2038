"""Ensure slimrand and the experiment scripts are importable for local pytest runs."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slimrand import config  # noqa: E402


@pytest.fixture(autouse=True)
def default_seed_config(monkeypatch):
    """Every test starts from the shipped seed configuration."""
    monkeypatch.setattr(config, "SEED_MODE", "random")
    monkeypatch.setattr(config, "SEED", None)
    monkeypatch.setattr(config, "TIME_GRANULARITY", "ns")
