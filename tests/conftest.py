"""
Shared fixtures for registry tests.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest


SCENARIO_DATA = {
    "versions": {
        "newrelic/agent": {"version": "1.2.3", "pretty_version": "v1.2.3"},
    },
    "root": {"name": "my-app", "version": "0.1.0"},
}

MULTI_PACKAGE_DATA = {
    "versions": {
        "zeta/last-alphabetically": {
            "version": "2.0.0.0",
            "pretty_version": "v2.0.0",
            "reference": "abc123",
            "install_path": "./zeta",
        },
        "alpha/first-alphabetically": {
            "version": "1.0.0.0",
            "pretty_version": "1.0.0",
            "custom_field": {"nested": True},
        },
        "mid/double-tag": {"version": "3.1.0.0", "pretty_version": "vv3.1.0"},
    },
    "root": {"name": "my-app", "version": "0.1.0", "type": "project"},
}


@pytest.fixture
def scenario_data() -> dict:
    return json.loads(json.dumps(SCENARIO_DATA))


@pytest.fixture
def multi_package_data() -> dict:
    return json.loads(json.dumps(MULTI_PACKAGE_DATA))


@pytest.fixture
def scenario_json(tmp_path: Path) -> Path:
    path = tmp_path / "installed.json"
    path.write_text(json.dumps(SCENARIO_DATA), encoding="utf-8")
    return path


@pytest.fixture
def multi_package_json(tmp_path: Path) -> Path:
    path = tmp_path / "multi.json"
    path.write_text(json.dumps(MULTI_PACKAGE_DATA), encoding="utf-8")
    return path
