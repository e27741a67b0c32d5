"""Euclidean norms of alternatives and selection of the best one."""

from __future__ import annotations

import math
from collections.abc import Iterable
from operator import itemgetter


def l2_norm(v: Iterable[float]) -> float:
    """Return the Euclidean length of a vector."""
    return math.sqrt(sum(x * x for x in v))


def l2_norm_vectors(m: Iterable[Iterable[float]]) -> list[float]:
    """Return the Euclidean length of every row of a matrix."""
    return [l2_norm(row) for row in m]


def index_of_best_vector(m: Iterable[Iterable[float]]) -> int:
    """Return the index of the row with the smallest norm (first on ties).

    Raises ValueError if the matrix has no rows or a norm is NaN.
    """
    norms = l2_norm_vectors(m)
    if not norms:
        raise ValueError("cannot pick the best vector of an empty matrix")
    if any(math.isnan(n) for n in norms):
        raise ValueError("norms are not ordered: NaN encountered")
    return min(enumerate(norms), key=itemgetter(1))[0]