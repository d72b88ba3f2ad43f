from decimal import Decimal

import pytest

from SIXES.services.results import MissingPlayerError, compute_results

from tests.factories import full_rotation, make_game, make_pairing, make_players, make_scores


def test_individual_example_hole():
    # hole 5: P1=4, P2=5, P3=5, P4=6 at $5
    results = compute_results(make_game("5"), make_players(), make_scores(5, {1: 4, 2: 5, 3: 5, 4: 6}), [])

    assert results[1].individual.wins == 1
    assert results[1].individual.winnings == Decimal("15")
    for pid in (2, 3, 4):
        assert results[pid].individual.losses == 1
        assert results[pid].individual.winnings == Decimal("-5")
    # no pairings yet, so the team game hasn't started
    assert all(r.team.wins == r.team.draws == r.team.losses == 0 for r in results.values())


def test_both_contests_combine():
    pairings = [make_pairing(1, (1, 2), (3, 4))]
    results = compute_results(make_game("5"), make_players(), make_scores(5, {1: 4, 2: 5, 3: 5, 4: 6}), pairings)

    assert results[1].team.winnings == Decimal("5")
    assert results[2].team.winnings == Decimal("5")
    assert results[3].team.winnings == Decimal("-5")
    assert results[1].combined_winnings == Decimal("20")
    assert results[2].combined_winnings == Decimal("0")
    assert results[3].combined_winnings == Decimal("-10")
    assert sum(r.combined_winnings for r in results.values()) == 0


def test_team_draw_example():
    # hole 3: team1 (4, 5) v team2 (5, 4)
    pairings = [make_pairing(1, (1, 2), (3, 4))]
    results = compute_results(make_game("1"), make_players(), make_scores(3, {1: 4, 2: 5, 3: 5, 4: 4}), pairings)

    for r in results.values():
        assert r.team.draws == 1
        assert r.team.winnings == 0


def test_opted_out_player_only_plays_team_game():
    pairings = [make_pairing(1, (1, 2), (3, 4))]
    scores = make_scores(1, {1: 5, 2: 5, 3: 6, 4: 3})
    results = compute_results(make_game("5"), make_players(opted_out={4}), scores, pairings)

    # Byrne's 3 doesn't count; the others tie on 5
    assert results[4].individual.wins == results[4].individual.draws == results[4].individual.losses == 0
    assert results[4].individual.winnings == 0
    assert [results[pid].individual.draws for pid in (1, 2, 3)] == [1, 1, 1]
    # team game: best ball 3 beats 5
    assert results[4].team.wins == 1
    assert results[4].team.winnings == Decimal("5")


def test_totals_and_tallies_over_a_round():
    scores = []
    for hole in range(1, 19):
        # P1 always alone on 3, the rest on 5
        scores += make_scores(hole, {1: 3, 2: 5, 3: 5, 4: 5})
    results = compute_results(make_game("1"), make_players(), scores, full_rotation())

    assert results[1].total_score == 54
    assert results[2].total_score == 90
    assert results[1].individual.wins == 18
    assert results[1].individual.winnings == Decimal("54")
    assert results[1].team.wins == 18
    # P2 partners P1 on section 1 only
    assert (results[2].team.wins, results[2].team.losses) == (6, 12)
    assert sum(r.combined_winnings for r in results.values()) == 0


def test_section_without_pairing_is_skipped():
    pairings = [make_pairing(1, (1, 2), (3, 4))]
    scores = make_scores(1, {1: 3, 2: 5, 3: 5, 4: 5}) + make_scores(13, {1: 3, 2: 5, 3: 5, 4: 5})
    results = compute_results(make_game("1"), make_players(), scores, pairings)

    assert results[1].team.wins == 1
    assert results[1].individual.wins == 2


def test_starting_hole_changes_the_pairing_used():
    # start on 7: hole 6 is in section 3 (P1P4 | P2P3)
    scores = make_scores(6, {1: 3, 2: 5, 3: 5, 4: 5})
    results = compute_results(make_game("1", starting_hole=7), make_players(), scores, full_rotation())

    assert results[4].team.wins == 1
    assert results[2].team.losses == 1


def test_incomplete_hole_still_counts_individually():
    scores = make_scores(2, {1: 4, 2: 5, 3: 6})
    results = compute_results(make_game("1"), make_players(), scores, full_rotation())

    assert results[1].individual.winnings == Decimal("2")
    assert results[4].individual.winnings == 0
    assert results[1].team.wins == 0


def test_unknown_player_aborts():
    scores = make_scores(1, {1: 4, 99: 5})
    with pytest.raises(MissingPlayerError):
        compute_results(make_game(), make_players(), scores, [])


def test_same_snapshot_same_answer():
    scores = make_scores(1, {1: 4, 2: 5, 3: 5, 4: 6}) + make_scores(9, {1: 5, 2: 4, 3: 4, 4: 6})
    args = (make_game("2"), make_players(opted_out={3}), scores, full_rotation())

    assert compute_results(*args) == compute_results(*args)
