"""
Pytest configuration for loadsim.

Provides fixtures for:
- Canonical scenario payloads
- Settings isolation (the settings cache is cleared around each test)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Generator

import pytest

from loadsim.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """
    Reset the cached Settings so environment overrides in one test do not leak.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def round_robin_payload() -> dict:
    return {"scenarioType": "RoundRobinMoneyTransfer", "nbTransfers": 5, "nbWallets": 3}


@pytest.fixture
def scenario_file(tmp_path: Path, round_robin_payload: dict) -> Path:
    """
    Write the round robin payload to a temporary JSON file.
    """
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps(round_robin_payload), encoding="utf-8")
    return path


@pytest.fixture
def definitions_file(tmp_path: Path, round_robin_payload: dict) -> Path:
    """
    Write a two-entry definitions array to a temporary JSON file.
    """
    definitions = [
        {"nbOfExecution": 2, "scenario": round_robin_payload},
        {
            "scenario": {
                "scenarioType": "SelfTransactionWithRandomPayload",
                "payloadSize": 64,
            }
        },
    ]
    path = tmp_path / "definitions.json"
    path.write_text(json.dumps(definitions), encoding="utf-8")
    return path
