# SIXES/services/gamesetup.py
from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction

from SIXES.models import Games, Players
from SIXES.utils import parse_date_any

logger = logging.getLogger(__name__)

PLAYERS_PER_GAME = 4


def _clean_bet_unit(bet_unit) -> Decimal:
    try:
        d = Decimal(str(bet_unit))
    except InvalidOperation:
        raise ValidationError(f"Bet unit must be a number, got {bet_unit!r}.")
    if d < 0:
        raise ValidationError("Bet unit cannot be negative.")
    return d.quantize(Decimal("0.01"))


@transaction.atomic
def create_game(location: str, play_date, bet_unit, player_names, starting_hole: int = 1,
                max_score: int | None = None) -> Games:
    """
    Create a Game and its four Players. The resume pointer starts on the
    starting hole. Raises ValidationError on bad input; nothing is saved then.
    """
    names = [(n or "").strip() for n in player_names]
    if len(names) != PLAYERS_PER_GAME:
        raise ValidationError(f"A game needs exactly {PLAYERS_PER_GAME} players.")
    if not all(names):
        raise ValidationError("Every player needs a name.")
    if not (location or "").strip():
        raise ValidationError("Location is required.")
    if not 1 <= int(starting_hole) <= 18:
        raise ValidationError("Starting hole must be between 1 and 18.")

    if max_score is None:
        max_score = settings.SIXES_DEFAULT_MAX_SCORE

    game = Games.objects.create(
        Location=location.strip(),
        PlayDate=parse_date_any(play_date),
        BetUnit=_clean_bet_unit(bet_unit),
        StartingHole=int(starting_hole),
        CurrentHole=int(starting_hole),
        MaxScore=int(max_score),
    )
    Players.objects.bulk_create([Players(GameID=game, Name=n) for n in names])
    logger.info("created game %s at %s (bet %s, start hole %s)", game.id, game.Location, game.BetUnit, game.StartingHole)
    return game


def game_players(game: Games) -> list[Players]:
    return list(Players.objects.filter(GameID=game).order_by("id"))


def set_individual_participation(player: Players, plays: bool) -> Players:
    player.PlaysIndividual = bool(plays)
    player.save(update_fields=["PlaysIndividual"])
    return player


def delete_game(game: Games) -> None:
    # Players, Scores and TeamPairing rows go with it (CASCADE)
    gid = game.id
    game.delete()
    logger.info("deleted game %s", gid)
