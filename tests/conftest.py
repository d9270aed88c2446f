"""Shared pytest fixtures for based-contract-args tests."""

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest


@pytest.fixture
def sample_args() -> Dict[str, List[Any]]:
    """Return a small name -> arguments mapping."""
    return {
        "Greeter": ["Hello!"],
        "Treasury": [],
        "Pool": ["0x1252E3f03E0caa840cbb35442d817a1686A62586", 1643317911],
        "Multisig": [["0xc4ec4d4A2CF16E9e4C473dAB6f12AD04D719098c"], 1],
    }


@pytest.fixture
def temp_args_dir(tmp_path: Path) -> Path:
    """Create a temporary argument file output directory."""
    args_dir = tmp_path / ".contract-args"
    args_dir.mkdir(parents=True, exist_ok=True)
    return args_dir


@pytest.fixture
def sample_args_json(tmp_path: Path, sample_args: Dict[str, List[Any]]) -> Path:
    """Write the sample mapping to a JSON file."""
    json_path = tmp_path / "contract_args.json"
    with open(json_path, "w") as f:
        json.dump(sample_args, f, indent=2)
    return json_path
