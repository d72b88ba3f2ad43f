# tests/factories.py
from datetime import date
from decimal import Decimal

from SIXES.models import Games, Players, Scores, TeamPairing


# ---- unsaved snapshots for the pure engine ----------------------

def make_game(bet_unit="5", starting_hole=1):
    return Games(id=1, Location="The Preserve", PlayDate=date(2026, 10, 19),
                 BetUnit=Decimal(bet_unit), StartingHole=starting_hole, CurrentHole=starting_hole)


def make_players(opted_out=()):
    names = ["Hunter", "Griffin", "Sullivan", "Byrne"]
    return [Players(id=i, GameID_id=1, Name=n, PlaysIndividual=i not in opted_out)
            for i, n in enumerate(names, start=1)]


def make_scores(hole, strokes_by_pid, par=4):
    return [Scores(GameID_id=1, PID_id=pid, HoleNumber=hole, Score=s, Par=par)
            for pid, s in strokes_by_pid.items()]


def make_pairing(section, team1, team2):
    return TeamPairing(GameID_id=1, Section=section,
                       Team1PID1_id=team1[0], Team1PID2_id=team1[1],
                       Team2PID1_id=team2[0], Team2PID2_id=team2[1])


def full_rotation():
    """P1P2|P3P4, then P1P3|P2P4, then P1P4|P2P3."""
    return [
        make_pairing(1, (1, 2), (3, 4)),
        make_pairing(2, (1, 3), (2, 4)),
        make_pairing(3, (1, 4), (2, 3)),
    ]
