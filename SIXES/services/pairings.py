# SIXES/services/pairings.py
"""
Choosing the partner rotation.

The captain picks a split for section 1, a different one for section 2, and
section 3 is whatever split is left. Only three splits exist for four
players, so this is a lookup over `canonical_partitions`, not a search.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from django.core.exceptions import ValidationError
from django.db import transaction

from SIXES.models import Games, Players, TeamPairing
from SIXES.services.gamesetup import game_players
from SIXES.services.sections import canonical_partitions, partition_key, remaining_option
from SIXES.services.team import pairing_for_hole as _pairing_for_hole

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PairingOption:
    id: int
    description: str
    team1: tuple
    team2: tuple


def pairing_options(players: Iterable[Players]) -> List[PairingOption]:
    players = list(players)
    if len(players) != 4:
        raise ValidationError(f"Team pairings need exactly 4 players, found {len(players)}.")
    names = {p.id: p.Name for p in players}
    out = []
    for option_id, (t1, t2) in canonical_partitions([p.id for p in players]).items():
        desc = f"{names[t1[0]]} & {names[t1[1]]} vs {names[t2[0]]} & {names[t2[1]]}"
        out.append(PairingOption(option_id, desc, t1, t2))
    return out


def _option_id_for(pairing: TeamPairing, options: List[PairingOption]) -> Optional[int]:
    key = partition_key(pairing.team1, pairing.team2)
    for o in options:
        if partition_key(o.team1, o.team2) == key:
            return o.id
    return None


def _save(game: Games, section: int, option: PairingOption) -> TeamPairing:
    obj, _ = TeamPairing.objects.update_or_create(
        GameID=game,
        Section=section,
        defaults={
            "Team1PID1_id": option.team1[0],
            "Team1PID2_id": option.team1[1],
            "Team2PID1_id": option.team2[0],
            "Team2PID2_id": option.team2[1],
        },
    )
    logger.info("game %s section %s: %s", game.id, section, option.description)
    return obj


@transaction.atomic
def confirm_pairing(game: Games, section: int, option_id: int) -> List[TeamPairing]:
    """
    Store the chosen split for section 1 or 2. Confirming section 2 also
    stores section 3. Returns the game's pairings after the change.
    """
    if section not in (1, 2):
        raise ValidationError("Only sections 1 and 2 are chosen; section 3 is automatic.")

    options = {o.id: o for o in pairing_options(game_players(game))}
    if option_id not in options:
        raise ValidationError(f"Unknown pairing option {option_id}.")

    if section == 2:
        first = TeamPairing.objects.filter(GameID=game, Section=1).first()
        if first is None:
            raise ValidationError("Choose the section 1 pairing first.")
        first_id = _option_id_for(first, list(options.values()))
        if first_id is None:
            raise ValidationError("Section 1 pairing does not match this game's players; reset pairings.")
        if first_id == option_id:
            raise ValidationError("Section 2 must use a different pairing than section 1.")
        _save(game, 2, options[option_id])
        _save(game, 3, options[remaining_option([first_id, option_id])])
        validate_pairings(TeamPairing.objects.filter(GameID=game))
    else:
        # a new first split invalidates whatever rotation followed it
        TeamPairing.objects.filter(GameID=game, Section__in=[2, 3]).delete()
        _save(game, 1, options[option_id])

    return list(TeamPairing.objects.filter(GameID=game).order_by("Section"))


def reset_pairings(game: Games) -> None:
    deleted, _ = TeamPairing.objects.filter(GameID=game).delete()
    logger.info("game %s: reset %s pairings", game.id, deleted)


def validate_pairings(pairings: Iterable[TeamPairing]) -> None:
    """A full rotation is three sections using three different splits."""
    pairings = list(pairings)
    sections = sorted(p.Section for p in pairings)
    if sections != [1, 2, 3]:
        raise ValidationError(f"Expected sections 1, 2 and 3, found {sections}.")
    keys = {partition_key(p.team1, p.team2) for p in pairings}
    if len(keys) != 3:
        raise ValidationError("Each section must use a different pairing.")
    for p in pairings:
        if len(set(p.team1 + p.team2)) != 4:
            raise ValidationError(f"Section {p.Section} must name four different players.")


def pairing_for_hole(game: Games, hole_number: int, pairings=None) -> Optional[TeamPairing]:
    if pairings is None:
        pairings = TeamPairing.objects.filter(GameID=game)
    return _pairing_for_hole(hole_number, game.StartingHole, list(pairings))
