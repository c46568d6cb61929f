"""
    Random sampling of rulers through their ids.

    Every natural number is the id of exactly one ruler (see :mod:`ogrpy.enumeration.index`),
    so drawing ids uniformly from `[0, 2^L)` draws uniformly from all rulers of length
    at most `L`.
"""
import logging

import numpy as np

from ..enumeration.index import decode, ID_BITS
from ..exceptions import InvalidParameterError

logger = logging.getLogger(__name__)


def sample_rulers(n, max_id, seed=None):
    """
        Draw `n` rulers with ids uniformly in `[0, max_id)`

        :param: n: number of rulers to draw
        :param: max_id: exclusive upper bound on the ids, at most `2^ID_BITS`
        :param: seed: optional, seed or `np.random.Generator` for reproducible draws
    """
    if n < 0:
        raise InvalidParameterError(f"Can not draw a negative number of rulers, got {n}")
    if not 0 < max_id <= 2 ** ID_BITS:
        raise InvalidParameterError(f"max_id must be in (0, 2^{ID_BITS}], got {max_id}")

    rng = np.random.default_rng(seed)
    ids = rng.integers(0, max_id, size=n, dtype=np.uint64)
    return [decode(int(i)) for i in ids]


def golomb_density(start, end):
    """
        Count the Golomb rulers among the ids in `range(start, end)`

        Returns a tuple `(golomb_count, total)`
    """
    golomb = 0
    total = 0
    for i in range(start, end):
        total += 1
        if decode(i).is_golomb_ruler():
            golomb += 1
    logger.debug("%d Golomb rulers among ids %d..%d", golomb, start, end)
    return golomb, total
