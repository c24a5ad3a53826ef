import logging

import pytest

from primality.millerrabin.tester import is_probably_prime
from primality.millerrabin.witnesses import (
    BASE_WITNESS_TABLE,
    EXTENDED_WITNESS_TABLE,
    WITNESS_TABLE,
    fallback_witnesses,
    select_witnesses,
)


def test_bounds_strictly_ascending():
    bounds = [bound for bound, _ in WITNESS_TABLE]
    assert bounds == sorted(set(bounds))
    assert WITNESS_TABLE[-1][0] > 2 ** 64


@pytest.mark.parametrize(
    "n, expected",
    [
        (5, (2,)),
        (2046, (2,)),
        (2047, (2, 3)),
        (1_373_652, (2, 3)),
        (1_373_653, (31, 73)),
        (9_080_191, (2, 3, 5)),
        (25_326_001, (2, 3, 5, 7)),
        (3_215_031_751, (2, 7, 61)),
        (4_759_123_141, (2, 13, 23, 1_662_803)),
        (1_122_004_669_633, (2, 3, 5, 7, 11)),
        (2_152_302_898_747, (2, 3, 5, 7, 11, 13)),
        (3_474_749_660_383, (2, 3, 5, 7, 11, 13, 17)),
        (341_550_071_728_321, (2, 3, 5, 7, 11, 13, 17, 19, 23)),
        (2 ** 63 - 1, (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)),
    ],
)
def test_first_matching_band_wins(n, expected):
    assert select_witnesses(n) == expected


def test_small_n_never_gets_a_wider_band():
    # 1000 satisfies every "n < bound" condition; only the first may apply
    assert select_witnesses(1000) == (2,)


@pytest.mark.parametrize("bound", [bound for bound, _ in BASE_WITNESS_TABLE + EXTENDED_WITNESS_TABLE[:1]])
def test_each_bound_is_rejected_by_its_selected_band(bound):
    assert is_probably_prime(bound, select_witnesses(bound)) is False


@pytest.mark.parametrize(
    "n, witnesses",
    [
        (2047, (2,)),
        (1_373_653, (2, 3)),
        (9_080_191, (31, 73)),
        (25_326_001, (2, 3, 5)),
        (3_215_031_751, (2, 3, 5, 7)),
        (4_759_123_141, (2, 7, 61)),
        (2_152_302_898_747, (2, 3, 5, 7, 11)),
        (3_474_749_660_383, (2, 3, 5, 7, 11, 13)),
        (341_550_071_728_321, (2, 3, 5, 7, 11, 13, 17)),
        (3_825_123_056_546_413_051, (2, 3, 5, 7, 11, 13, 17, 19, 23)),
    ],
)
def test_bounds_are_strong_pseudoprimes_to_the_previous_band(n, witnesses):
    assert is_probably_prime(n, witnesses) is True


def test_rejects_n_below_two():
    with pytest.raises(ValueError):
        select_witnesses(1)


def test_fallback_beyond_table(caplog):
    n = 341_550_071_728_321
    with caplog.at_level(logging.WARNING, logger="primality.millerrabin.witnesses"):
        witnesses = select_witnesses(n, table=BASE_WITNESS_TABLE)
    assert "probabilistic" in caplog.text
    assert witnesses == fallback_witnesses(n)
    assert witnesses[:7] == (2, 3, 4, 5, 6, 7, 8)
    assert len(witnesses) > 100
    assert is_probably_prime(n, witnesses) is False


def test_fallback_witnesses_are_reproducible_and_capped():
    assert fallback_witnesses(2 ** 61 - 1) == fallback_witnesses(2 ** 61 - 1)
    assert fallback_witnesses(4) == ()
    assert fallback_witnesses(5) == (2,)
    assert max(fallback_witnesses(101)) <= 99
