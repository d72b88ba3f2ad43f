from decimal import Decimal

from SIXES.services.outcomes import DRAW, LOSS, WIN
from SIXES.services.team import evaluate_hole, pairing_for_hole

from tests.factories import full_rotation, make_pairing

PAIRING = make_pairing(1, (1, 2), (3, 4))


def test_best_ball_wins():
    out = evaluate_hole({1: 3, 2: 7, 3: 4, 4: 4}.items(), PAIRING, Decimal("1"))

    assert out[1].result == out[2].result == WIN
    assert out[3].result == out[4].result == LOSS
    assert out[1].delta == out[2].delta == Decimal("1")
    assert out[3].delta == out[4].delta == Decimal("-1")
    assert sum(o.delta for o in out.values()) == 0


def test_second_ball_breaks_best_ball_tie():
    out = evaluate_hole({1: 4, 2: 6, 3: 4, 4: 5}.items(), PAIRING, Decimal("2"))

    assert out[3].result == out[4].result == WIN
    assert out[1].result == out[2].result == LOSS
    assert out[3].delta == Decimal("2")
    assert out[1].delta == Decimal("-2")


def test_both_balls_tied_is_a_draw():
    # team1 (4, 5) v team2 (5, 4)
    out = evaluate_hole({1: 4, 2: 5, 3: 5, 4: 4}.items(), PAIRING, Decimal("1"))

    assert {o.result for o in out.values()} == {DRAW}
    assert all(o.delta == 0 for o in out.values())
    assert set(out) == {1, 2, 3, 4}


def test_missing_partner_skips_hole():
    assert evaluate_hole({1: 4, 2: 5, 3: 5}.items(), PAIRING, Decimal("1")) == {}
    assert evaluate_hole({}.items(), PAIRING, Decimal("1")) == {}


def test_pairing_for_hole_follows_sections():
    pairings = full_rotation()

    assert pairing_for_hole(1, 1, pairings).Section == 1
    assert pairing_for_hole(7, 1, pairings).Section == 2
    assert pairing_for_hole(18, 1, pairings).Section == 3
    # start on 7: hole 6 is the last hole of the round
    assert pairing_for_hole(6, 7, pairings).Section == 3


def test_pairing_for_hole_without_pairing():
    assert pairing_for_hole(13, 1, full_rotation()[:2]) is None
    assert pairing_for_hole(1, 1, []) is None
