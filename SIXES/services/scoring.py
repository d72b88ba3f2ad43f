# SIXES/services/scoring.py
"""
Hole-by-hole score entry and the resume pointer.

Input checks live here, not in the results engine: par 3..5, hole 1..18,
strokes 1..MaxScore, and a hole is only saved once every player has a score.
"""

from __future__ import annotations

import logging
from typing import Dict

from django.core.exceptions import ValidationError
from django.db import transaction

from SIXES.models import Games, Scores
from SIXES.services.gamesetup import game_players
from SIXES.services.sections import HOLES, section_for

logger = logging.getLogger(__name__)


def _check_hole(hole_number) -> int:
    try:
        hole = int(hole_number)
    except (TypeError, ValueError):
        raise ValidationError("Please enter a valid hole number (1-18)")
    if hole not in HOLES:
        raise ValidationError("Please enter a valid hole number (1-18)")
    return hole


@transaction.atomic
def record_hole(game: Games, hole_number: int, par: int, scores_by_pid: Dict[int, int]) -> list[Scores]:
    """
    Upsert every player's strokes for one hole. All or nothing.
    """
    hole = _check_hole(hole_number)
    if par is None or not 3 <= int(par) <= 5:
        raise ValidationError("Please enter a par value (3-5)")

    players = game_players(game)
    missing = [p.Name for p in players if p.id not in scores_by_pid]
    if missing:
        raise ValidationError(f"Please enter scores for all players (missing: {', '.join(missing)})")

    strokes = {p.id: int(scores_by_pid[p.id]) for p in players}
    if any(not 1 <= s <= game.MaxScore for s in strokes.values()):
        raise ValidationError(
            f"Score cannot exceed {game.MaxScore}. Please enter a value between 1 and {game.MaxScore}."
        )

    rows = []
    for p in players:
        obj, _ = Scores.objects.update_or_create(
            GameID=game,
            PID=p,
            HoleNumber=hole,
            defaults={"Score": strokes[p.id], "Par": int(par)},
        )
        rows.append(obj)

    logger.info("game %s hole %s saved (par %s)", game.id, hole, par)
    return rows


def hole_is_complete(game: Games, hole_number: int) -> bool:
    players = game_players(game)
    posted = Scores.objects.filter(GameID=game, HoleNumber=hole_number).values_list("PID_id", flat=True)
    return bool(players) and {p.id for p in players} <= set(posted)


def all_holes_scored(game: Games) -> bool:
    """Gating flag for 'view final results'. The results engine never uses it."""
    players = game_players(game)
    if not players:
        return False
    posted = set(Scores.objects.filter(GameID=game).values_list("PID_id", "HoleNumber"))
    return all((p.id, h) in posted for p in players for h in HOLES)


# ---- navigation -------------------------------------------------

def _move_to(game: Games, hole: int) -> Games:
    game.CurrentHole = hole
    game.save(update_fields=["CurrentHole"])
    return game


def next_hole(game: Games) -> Games:
    return _move_to(game, 1 if game.CurrentHole == 18 else game.CurrentHole + 1)


def previous_hole(game: Games) -> Games:
    return _move_to(game, 18 if game.CurrentHole == 1 else game.CurrentHole - 1)


def go_to_hole(game: Games, hole_number) -> Games:
    return _move_to(game, _check_hole(hole_number))


def current_section(game: Games) -> int:
    return section_for(game.CurrentHole, game.StartingHole)


def score_label(score: int, par: int) -> str:
    d = score - par
    if d <= -2: return "Eagle+"
    if d == -1: return "Birdie"
    if d ==  0: return "Par"
    if d ==  1: return "Bogey"
    return "Double+"
