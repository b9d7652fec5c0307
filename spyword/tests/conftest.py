"""Shared fixtures for the Spyword test suite."""

import random

import pytest

from spyword.game.controller import RoundController
from spyword.messages.localization import Localization
from spyword.words.supply import WordSupply

WORDS = ["Airport", "Beach", "Casino", "Dentist", "Embassy"]


@pytest.fixture(autouse=True, scope="session")
def localization():
    """Load the bundled locales once for the whole run."""
    Localization.init()
    yield Localization


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def supply(rng):
    return WordSupply.from_lines(WORDS, rng=rng)


@pytest.fixture
def controller(supply, rng):
    controller = RoundController(supply=supply)
    controller.set_rng(rng)
    return controller
