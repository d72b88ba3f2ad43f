# SIXES/services/team.py
"""
Team game: two pairs per hole, the pairing set by the hole's section.

Best ball decides; if the best balls tie, the partners' second balls decide;
if those tie too the hole is halved. Every player wins or loses one bet unit,
so a decided hole moves 2 units from the losing pair to the winning pair.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, Iterable, Optional, Tuple

from SIXES.services.outcomes import DRAW, LOSS, WIN, HoleOutcome
from SIXES.services.sections import section_for

logger = logging.getLogger(__name__)


def _team_balls(team: Tuple[int, int], scores: Dict[int, int]) -> Optional[Tuple[int, int]]:
    """(best, second) for a pair, or None unless both partners posted."""
    balls = sorted(scores[pid] for pid in team if pid in scores)
    if len(balls) < 2:
        return None
    return balls[0], balls[1]


def _compare(a: int, b: int) -> int:
    """-1 if team1 lower, 1 if team2 lower, 0 if equal."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def evaluate_hole(hole_scores: Iterable[Tuple[int, int]], pairing, bet_unit: Decimal) -> Dict[int, HoleOutcome]:
    """
    hole_scores: (pid, strokes) posted on this hole.
    pairing: anything exposing `team1` and `team2` as pid pairs (TeamPairing).

    Returns {pid: HoleOutcome} for the four players, or {} when the hole can't
    be settled yet (a partner hasn't posted).
    """
    scores = dict(hole_scores)
    t1 = _team_balls(pairing.team1, scores)
    t2 = _team_balls(pairing.team2, scores)
    if t1 is None or t2 is None:
        return {}

    verdict = _compare(t1[0], t2[0]) or _compare(t1[1], t2[1])

    if verdict == 0:
        return {pid: HoleOutcome(DRAW, Decimal("0")) for pid in pairing.team1 + pairing.team2}

    winners, losers = (pairing.team1, pairing.team2) if verdict < 0 else (pairing.team2, pairing.team1)
    out = {pid: HoleOutcome(WIN, bet_unit) for pid in winners}
    out.update({pid: HoleOutcome(LOSS, -bet_unit) for pid in losers})
    return out


def pairing_for_hole(hole_number: int, starting_hole: int, pairings) -> Optional[object]:
    """The pairing whose Section covers this hole, or None if not chosen yet."""
    section = section_for(hole_number, starting_hole)
    for p in pairings:
        if p.Section == section:
            return p
    logger.debug("no pairing for hole %s (section %s)", hole_number, section)
    return None
