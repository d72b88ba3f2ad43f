# SIXES/services/individual.py
"""
Individual game: every opted-in player against the field, hole by hole.

Low score alone wins one bet unit from each other participant. If the low
score is shared, the whole hole is a draw for everybody, including the
players who did not make the low score.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterable, Tuple

from SIXES.services.outcomes import DRAW, LOSS, WIN, HoleOutcome


def evaluate_hole(hole_scores: Iterable[Tuple[int, int]], bet_unit: Decimal) -> Dict[int, HoleOutcome]:
    """
    hole_scores: (pid, strokes) for the participating players who posted
    on this hole. Returns {pid: HoleOutcome}; empty if nobody posted.
    """
    scores = dict(hole_scores)
    if not scores:
        return {}

    low = min(scores.values())
    low_pids = [pid for pid, s in scores.items() if s == low]

    if len(low_pids) > 1:
        return {pid: HoleOutcome(DRAW, Decimal("0")) for pid in scores}

    winner = low_pids[0]
    others = len(scores) - 1
    out = {}
    for pid in scores:
        if pid == winner:
            out[pid] = HoleOutcome(WIN, bet_unit * others)
        else:
            out[pid] = HoleOutcome(LOSS, -bet_unit)
    return out
