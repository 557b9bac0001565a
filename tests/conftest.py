"""Shared fixtures for the CaesarLab test suite."""

import pytest
from click.testing import CliRunner

from shared.config import CaesarLabConfig
from caesar.core.engine import CaesarEngine

ENGLISH = (
    "It was the best of times, it was the worst of times, it was the age "
    "of wisdom, it was the age of foolishness, it was the epoch of belief, "
    "it was the epoch of incredulity, it was the season of Light."
)


@pytest.fixture
def english_text() -> str:
    return ENGLISH


@pytest.fixture
def config() -> CaesarLabConfig:
    return CaesarLabConfig()


@pytest.fixture
def engine(config) -> CaesarEngine:
    return CaesarEngine(config)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
