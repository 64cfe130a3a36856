"""Shared test fixtures for termlint.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from termlint.model.loader import loads_model
from termlint.model.nodes import Model

WEATHER_MODEL = """\
{
  "smithy": "2.0",
  "shapes": {
    "example.weather#MasterRecord": {
      "type": "structure",
      "traits": {
        "smithy.api#documentation": "Replicated from the slave node.",
        "example.weather#tags": {"owner": "whitelist team", "labels": ["stable", "Blacklist"]}
      },
      "members": {
        "cityId": {"target": "smithy.api#String"}
      }
    },
    "example.weather#Forecast": {
      "type": "string"
    }
  }
}
"""


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def weather_model() -> Model:
    return loads_model(WEATHER_MODEL, filename="weather.json")


@pytest.fixture()
def weather_model_file(tmp_path: Path) -> Path:
    path = tmp_path / "weather.json"
    path.write_text(WEATHER_MODEL, encoding="utf-8")
    return path
