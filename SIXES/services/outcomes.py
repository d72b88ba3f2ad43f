# SIXES/services/outcomes.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

WIN = "WIN"
DRAW = "DRAW"
LOSS = "LOSS"


@dataclass(frozen=True)
class HoleOutcome:
    """One player's result on one hole of one contest."""
    result: str          # WIN / DRAW / LOSS
    delta: Decimal       # signed money moved on this hole


@dataclass(frozen=True)
class ContestTally:
    wins: int = 0
    draws: int = 0
    losses: int = 0
    winnings: Decimal = Decimal("0")

    def add(self, outcome: HoleOutcome) -> "ContestTally":
        return ContestTally(
            wins=self.wins + (outcome.result == WIN),
            draws=self.draws + (outcome.result == DRAW),
            losses=self.losses + (outcome.result == LOSS),
            winnings=self.winnings + outcome.delta,
        )
