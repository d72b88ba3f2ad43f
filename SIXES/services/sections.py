# SIXES/services/sections.py
"""
Section rotation for the team game.

A round is split into three 6-hole sections counted from the starting hole,
wrapping past 18 back to 1. Each section plays one of the three ways four
players can be split into two pairs.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

HOLES = range(1, 19)
SECTIONS = (1, 2, 3)
HOLES_PER_SECTION = 6


def section_for(hole_number: int, starting_hole: int) -> int:
    """
    Map a hole to its section (1..3) relative to the starting hole.

    Inputs are assumed to be validated (1..18).
    """
    position = ((hole_number - starting_hole) % 18) + 1
    return ((position - 1) // HOLES_PER_SECTION) + 1


def holes_in_section(section: int, starting_hole: int) -> list[int]:
    """Hole numbers in play order for one section, e.g. (3, 7) -> [1..6]."""
    first = (section - 1) * HOLES_PER_SECTION
    return [((starting_hole - 1 + first + i) % 18) + 1 for i in range(HOLES_PER_SECTION)]


# ---- canonical partitions --------------------------------------

# index layout into (P1, P2, P3, P4): team1 pair, team2 pair
_PARTITION_LAYOUT = {
    1: ((0, 1), (2, 3)),   # P1P2 | P3P4
    2: ((0, 2), (1, 3)),   # P1P3 | P2P4
    3: ((0, 3), (1, 2)),   # P1P4 | P2P3
}


def canonical_partitions(pids: Sequence[int]) -> dict[int, tuple[tuple[int, int], tuple[int, int]]]:
    """
    {1: ((p1, p2), (p3, p4)), 2: ((p1, p3), (p2, p4)), 3: ((p1, p4), (p2, p3))}
    for exactly four player ids.
    """
    if len(pids) != 4:
        raise ValueError(f"team game needs exactly 4 players, got {len(pids)}")
    out = {}
    for option_id, (t1, t2) in _PARTITION_LAYOUT.items():
        out[option_id] = ((pids[t1[0]], pids[t1[1]]), (pids[t2[0]], pids[t2[1]]))
    return out


def partition_key(team1: Iterable[int], team2: Iterable[int]) -> frozenset:
    """Order-free identity of a split, so {AB|CD} == {DC|BA}."""
    return frozenset([frozenset(team1), frozenset(team2)])


def remaining_option(used: Iterable[Optional[int]]) -> Optional[int]:
    """The one canonical option id not in `used`, or None if that is ambiguous."""
    used = set(used)
    left = [oid for oid in _PARTITION_LAYOUT if oid not in used]
    return left[0] if len(left) == 1 else None
