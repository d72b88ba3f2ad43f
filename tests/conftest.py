# tests/conftest.py
import pytest

from SIXES.services.gamesetup import create_game, game_players


@pytest.fixture
def game(db):
    return create_game("The Preserve", "2026-10-19", "5", ["Hunter", "Griffin", "Sullivan", "Byrne"])


@pytest.fixture
def players(game):
    return game_players(game)
