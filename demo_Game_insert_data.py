# Seed a demo game (four players, all three pairings, 18 holes) and print its report.

import os
import django

# Set up Django environment
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'clubhouse.settings')
django.setup()

from SIXES.services.gamesetup import create_game, game_players
from SIXES.services.pairings import confirm_pairing
from SIXES.services.scoring import record_hole
from SIXES.services.report import format_shareable_report

# Data to be inserted
game_data = {
    "location": "The Preserve",
    "play_date": "2026-10-19",
    "bet_unit": "5",
    "starting_hole": 10,
    "player_names": ["Hunter", "Griffin", "Sullivan", "Byrne"],
}

# strokes per hole for each player, holes 1..18
scores_data = [
    [4, 5, 4, 3, 5, 4, 4, 3, 5, 4, 4, 5, 3, 4, 5, 4, 4, 5],
    [5, 4, 4, 4, 6, 4, 5, 3, 4, 5, 4, 5, 4, 4, 5, 3, 5, 5],
    [4, 4, 5, 3, 5, 5, 4, 4, 5, 4, 5, 4, 3, 5, 4, 4, 4, 6],
    [6, 5, 4, 4, 5, 4, 5, 3, 6, 4, 4, 4, 4, 4, 5, 5, 4, 5],
]
pars = [4, 4, 4, 3, 5, 4, 4, 3, 5, 4, 4, 5, 3, 4, 5, 4, 4, 5]

game = create_game(**game_data)
players = game_players(game)

confirm_pairing(game, 1, 1)
confirm_pairing(game, 2, 2)

for hole in range(1, 19):
    record_hole(game, hole, pars[hole - 1],
                {p.id: scores_data[i][hole - 1] for i, p in enumerate(players)})

print(f"Created game {game.id}")
print(format_shareable_report(game.id))
