import pytest

from SIXES.services.sections import (
    canonical_partitions, holes_in_section, partition_key, remaining_option, section_for,
)


@pytest.mark.parametrize("hole", range(1, 19))
def test_section_for_from_first_tee(hole):
    assert section_for(hole, 1) == (hole - 1) // 6 + 1


@pytest.mark.parametrize("start", range(1, 19))
def test_hole_before_start_is_last_section(start):
    before = 18 if start == 1 else start - 1
    assert section_for(before, start) == 3
    assert section_for(start, start) == 1


def test_section_for_wraps_past_18():
    assert section_for(7, 7) == 1
    assert section_for(12, 7) == 1
    assert section_for(13, 7) == 2
    assert section_for(6, 7) == 3
    assert section_for(1, 7) == 3


def test_holes_in_section():
    assert holes_in_section(1, 7) == [7, 8, 9, 10, 11, 12]
    assert holes_in_section(3, 7) == [1, 2, 3, 4, 5, 6]
    assert holes_in_section(1, 16) == [16, 17, 18, 1, 2, 3]
    assert holes_in_section(2, 16) == [4, 5, 6, 7, 8, 9]


def test_holes_in_section_agrees_with_section_for():
    for start in range(1, 19):
        for section in (1, 2, 3):
            assert {section_for(h, start) for h in holes_in_section(section, start)} == {section}


def test_canonical_partitions():
    assert canonical_partitions([11, 12, 13, 14]) == {
        1: ((11, 12), (13, 14)),
        2: ((11, 13), (12, 14)),
        3: ((11, 14), (12, 13)),
    }


def test_canonical_partitions_needs_four():
    with pytest.raises(ValueError):
        canonical_partitions([1, 2, 3])


def test_three_partitions_are_distinct():
    keys = {partition_key(t1, t2) for t1, t2 in canonical_partitions([1, 2, 3, 4]).values()}
    assert len(keys) == 3


def test_partition_key_ignores_order():
    assert partition_key((1, 2), (3, 4)) == partition_key((4, 3), (2, 1))
    assert partition_key((1, 2), (3, 4)) != partition_key((1, 3), (2, 4))


def test_remaining_option():
    assert remaining_option([1, 2]) == 3
    assert remaining_option([3, 1]) == 2
    assert remaining_option([1]) is None
