# SIXES/services/report.py
"""
Plain-text reports, ready to paste into a text message or email.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterable, List

from SIXES.models import Games, Players, Scores
from SIXES.services import results as results_svc
from SIXES.services.results import PlayerResult
from SIXES.services.sections import HOLES
from SIXES.utils import to_short

BANNER = "----------------"


def _money(d: Decimal) -> str:
    return f"${Decimal(d):.2f}"


def _wdl(tally) -> str:
    return f"W{tally.wins} D{tally.draws} L{tally.losses} = {_money(tally.winnings)}"


def format_report(game: Games, player_results: Dict[int, PlayerResult]) -> str:
    lines: List[str] = [
        "GOLF SCORE REPORT",
        BANNER,
        f"Location: {game.Location}",
        f"Date: {to_short(game.PlayDate)}",
        f"Bet Unit: {_money(game.BetUnit)}",
        "",
        "RESULTS SUMMARY",
        BANNER,
        "",
        "INDIVIDUAL GAME:",
    ]

    for r in player_results.values():
        if r.player.PlaysIndividual:
            lines.append(f"{r.player.Name}: {_wdl(r.individual)}")
        else:
            lines.append(f"{r.player.Name}: Did not participate")

    lines += ["", "TEAM GAME:"]
    for r in player_results.values():
        lines.append(f"{r.player.Name}: {_wdl(r.team)}")

    lines += ["", "COMBINED TOTALS:"]
    # sorted() is stable, ties keep result-map order
    for r in sorted(player_results.values(), key=lambda r: r.combined_winnings, reverse=True):
        lines.append(f"{r.player.Name}: {_money(r.combined_winnings)}")

    return "\n".join(lines) + "\n"


def format_scorecard(game: Games, players: Iterable[Players], scores: Iterable[Scores]) -> str:
    """
    Tab-separated hole grid: Hole, Par, one column per player, then a Total row.
    Holes nobody has scored are left out; a missing score shows as "-".
    """
    players = list(players)
    grid: Dict[int, Dict[int, Scores]] = {}
    for s in scores:
        grid.setdefault(s.HoleNumber, {})[s.PID_id] = s

    lines = [
        f"Golf Score Report - {game.Location}",
        f"Date: {to_short(game.PlayDate)}",
        "",
        "\t".join(["Hole", "Par"] + [p.Name for p in players]),
    ]

    totals = {p.id: 0 for p in players}
    for hole in HOLES:
        row = grid.get(hole)
        if not row:
            continue
        par = next(iter(row.values())).Par
        cells = [str(hole), str(par)]
        for p in players:
            sc = row.get(p.id)
            if sc is None:
                cells.append("-")
            else:
                cells.append(str(sc.Score))
                totals[p.id] += sc.Score
        lines.append("\t".join(cells))

    lines.append("")
    lines.append("\t".join(["Total", "-"] + [str(totals[p.id]) for p in players]))
    return "\n".join(lines) + "\n"


def format_shareable_report(game_id: int) -> str:
    game = results_svc.get_game(game_id)
    return format_report(game, results_svc.results_for_game(game_id))


def format_scorecard_for_game(game_id: int) -> str:
    game = results_svc.get_game(game_id)
    scores = results_svc.list_scores_for_game(game_id)
    return format_scorecard(game, results_svc.players_for_scores(scores), scores)
