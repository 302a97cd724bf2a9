"""Shared fixtures: an isolated config/data directory and a pinned clock."""

import pendulum
import pytest

from weekplan import configuration, state
from weekplan.initialize import initialize
from weekplan.repository.configuration import CONFIGURATION_REPO
from weekplan.repository.entry import ENTRY_REPO
from weekplan.repository.tag import TAG_REPO
from weekplan.time import fixed_clock

# Wednesday of ISO week 2025-W07 (Monday Feb 10 - Sunday Feb 16)
FIXED_NOW = pendulum.datetime(2025, 2, 12, 10, 0, 0, tz="local")
FIXED_WEEK = "2025-W07"


@pytest.fixture(autouse=True)
def workspace(tmp_path, monkeypatch):
    """Point config and data at tmp_path and start every repository empty."""
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_dir)
    monkeypatch.setattr(configuration, "DATA_ENTRIES_DIR", data_dir / "entries")
    monkeypatch.setattr(configuration, "DATA_TAGS_PATH", data_dir / "tags.yaml")
    monkeypatch.setattr(
        configuration, "DATA_RETIRED_IDS_PATH", data_dir / "retired_ids.yaml"
    )

    for attribute, value in (
        ("_entries", None),
        ("_retired_ids", None),
        ("is_dirty", False),
        ("_dirty_ids", set()),
        ("_deleted_ids", set()),
    ):
        monkeypatch.setattr(ENTRY_REPO, attribute, value)
    monkeypatch.setattr(TAG_REPO, "_tags", None)
    monkeypatch.setattr(TAG_REPO, "is_dirty", False)
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)

    initialize()
    yield tmp_path


@pytest.fixture
def clock():
    """Pin 'now' to FIXED_NOW for code that reads the shared clock."""
    token = state.set_clock(fixed_clock(FIXED_NOW))
    yield state.get_clock()
    state.reset_clock(token)


def clock_at(year, month, day, hour=12):
    return fixed_clock(pendulum.datetime(year, month, day, hour, 0, 0, tz="local"))
