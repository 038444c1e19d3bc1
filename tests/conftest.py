"""Pytest configuration and shared fixtures."""

import os
from pathlib import Path

import pytest

# Keep CLI runs from dropping log files into the working tree.
os.environ.setdefault("PICKERS_LOG_TO_FILE", "false")

from pickers.config import Settings  # noqa: E402
from pickers.engine import generate_country_list, generate_language_groups  # noqa: E402
from pickers.models import Item, ItemGroups, ItemList  # noqa: E402


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings isolated from any developer-local .env file."""
    return Settings(_env_file=None, log_dir=tmp_path / "logs", log_to_file=False)


@pytest.fixture
def france_germany() -> ItemList:
    """Unshuffled country items for FR and DE."""
    return generate_country_list(shuffle=False, codes=["FR", "DE"])


@pytest.fixture
def language_groups() -> ItemGroups:
    """The default 60 languages in pages of 20."""
    return generate_language_groups(60, 20)


@pytest.fixture
def sample_items() -> ItemList:
    """A small mixed-case list for filter tests."""
    return [
        Item(label="Alpha", icon="a"),
        Item(label="alphabet", icon="b"),
        Item(label="Beta", icon="c"),
        Item(label="ALPINE", icon="d"),
        Item(label="Gamma", icon="e"),
    ]
