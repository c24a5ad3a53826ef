# primality/millerrabin/witnesses.py
# Proven deterministic Miller-Rabin witness sets, keyed by an exclusive upper bound on n.
import logging
from typing import Sequence, Tuple

import mpmath as mp

logger = logging.getLogger(__name__)

WitnessBand = Tuple[int, Tuple[int, ...]]

BASE_WITNESS_TABLE: Tuple[WitnessBand, ...] = (
    (2_047, (2,)),
    (1_373_653, (2, 3)),
    (9_080_191, (31, 73)),
    (25_326_001, (2, 3, 5)),
    (3_215_031_751, (2, 3, 5, 7)),
    (4_759_123_141, (2, 7, 61)),
    (1_122_004_669_633, (2, 13, 23, 1_662_803)),
    (2_152_302_898_747, (2, 3, 5, 7, 11)),
    (3_474_749_660_383, (2, 3, 5, 7, 11, 13)),
    (341_550_071_728_321, (2, 3, 5, 7, 11, 13, 17)),
)

# The last bound lies above 2**64, so WITNESS_TABLE is deterministic for every 64-bit n.
EXTENDED_WITNESS_TABLE: Tuple[WitnessBand, ...] = (
    (3_825_123_056_546_413_051, (2, 3, 5, 7, 11, 13, 17, 19, 23)),
    (318_665_857_834_031_151_167_461, (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)),
)

WITNESS_TABLE: Tuple[WitnessBand, ...] = BASE_WITNESS_TABLE + EXTENDED_WITNESS_TABLE


def fallback_witnesses(n: int) -> Tuple[int, ...]:
    """Bases 2..k with k = 2 * floor(ln n * ln ln n / ln 2), capped at n - 2.

    Not a proof of primality: beyond the tabulated bounds this is only a
    strong probable-prime check.
    """
    if n < 5:
        return ()
    with mp.workdps(20):
        logn = mp.log(n)
        k = 2 * int(mp.floor(logn * mp.log(logn) / mp.log(2)))
    k = min(max(k, 2), n - 2)
    return tuple(range(2, k + 1))


def select_witnesses(n: int, table: Sequence[WitnessBand] = WITNESS_TABLE) -> Tuple[int, ...]:
    if n < 2:
        raise ValueError(f"no witnesses for n < 2, got {n}")
    # first match in ascending order; a later, looser band must never win
    for bound, witnesses in table:
        if n < bound:
            return witnesses
    logger.warning("n=%d is beyond the proven witness table; result is probabilistic", n)
    return fallback_witnesses(n)
