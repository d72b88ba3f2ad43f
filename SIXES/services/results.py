# SIXES/services/results.py
"""
Results for a Sixes game.

`compute_results` is the pure engine: it takes already-loaded Games, Players,
Scores and TeamPairing rows (saved or not, it only reads attributes) and
returns {pid: PlayerResult}. It never writes anything back, so calling it
twice on the same snapshot gives the same answer.

`results_for_game(game_id)` is the ORM entry point: load a snapshot, then
compute.

Partial data is expected mid-round: a hole with no scores, a pair with one
partner missing, or a section with no pairing simply contributes nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List

from SIXES.models import Games, Players, Scores, TeamPairing
from SIXES.services import individual, team
from SIXES.services.outcomes import ContestTally
from SIXES.services.sections import HOLES

logger = logging.getLogger(__name__)


class MissingPlayerError(LookupError):
    """A score points at a player the snapshot doesn't contain."""


@dataclass(frozen=True)
class PlayerResult:
    player: Players
    total_score: int
    individual: ContestTally
    team: ContestTally

    @property
    def combined_winnings(self) -> Decimal:
        return self.individual.winnings + self.team.winnings


# ------------------------------------------------------------------ #
# Snapshot loading (persistence collaborator)                        #
# ------------------------------------------------------------------ #

def get_game(game_id: int) -> Games:
    return Games.objects.get(pk=game_id)


def get_player(pid: int) -> Players:
    return Players.objects.get(pk=pid)


def list_scores_for_game(game_id: int) -> List[Scores]:
    return list(Scores.objects.filter(GameID_id=game_id).order_by("HoleNumber", "PID_id"))


def list_pairings_for_game(game_id: int) -> List[TeamPairing]:
    return list(TeamPairing.objects.filter(GameID_id=game_id).order_by("Section"))


def players_for_scores(scores: Iterable[Scores]) -> List[Players]:
    """
    Every player who posted a score, ordered by id. A missing Players row is
    a data-integrity problem and raises Players.DoesNotExist.
    """
    pids = sorted({s.PID_id for s in scores})
    return [get_player(pid) for pid in pids]


# ------------------------------------------------------------------ #
# Engine                                                             #
# ------------------------------------------------------------------ #

def _scores_by_hole(scores: Iterable[Scores]) -> Dict[int, Dict[int, int]]:
    out: Dict[int, Dict[int, int]] = {}
    for s in scores:
        out.setdefault(s.HoleNumber, {})[s.PID_id] = s.Score
    return out


def compute_results(game: Games, players: Iterable[Players], scores: Iterable[Scores],
                    pairings: Iterable[TeamPairing]) -> Dict[int, PlayerResult]:
    players = list(players)
    scores = list(scores)
    pairings = list(pairings)

    by_pid = {p.id: p for p in players}
    for s in scores:
        if s.PID_id not in by_pid:
            raise MissingPlayerError(f"score for hole {s.HoleNumber} references unknown player {s.PID_id}")

    bet_unit = Decimal(game.BetUnit)
    individual_pids = {p.id for p in players if p.PlaysIndividual}
    hole_map = _scores_by_hole(scores)

    ind = {pid: ContestTally() for pid in by_pid}
    tm = {pid: ContestTally() for pid in by_pid}

    for hole in HOLES:
        hole_scores = hole_map.get(hole, {})

        eligible = [(pid, s) for pid, s in hole_scores.items() if pid in individual_pids]
        for pid, outcome in individual.evaluate_hole(eligible, bet_unit).items():
            ind[pid] = ind[pid].add(outcome)

        pairing = team.pairing_for_hole(hole, game.StartingHole, pairings)
        if pairing is None:
            continue
        for pid, outcome in team.evaluate_hole(hole_scores.items(), pairing, bet_unit).items():
            if pid in tm:
                tm[pid] = tm[pid].add(outcome)

    totals = {pid: 0 for pid in by_pid}
    for s in scores:
        totals[s.PID_id] += s.Score

    results = {}
    for p in players:
        results[p.id] = PlayerResult(
            player=p,
            total_score=totals[p.id],
            individual=ind[p.id],
            team=tm[p.id],
        )
    logger.debug("computed results for game %s: %s players, %s scores", game.id, len(players), len(scores))
    return results


def results_for_game(game_id: int) -> Dict[int, PlayerResult]:
    """Load a snapshot of the game and compute results for it."""
    game = get_game(game_id)
    scores = list_scores_for_game(game_id)
    pairings = list_pairings_for_game(game_id)
    players = players_for_scores(scores)
    return compute_results(game, players, scores, pairings)
