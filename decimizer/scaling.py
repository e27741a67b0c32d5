"""Linear rescaling of value vectors onto the unit interval."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def rescale_vector(
    v: Iterable[float], shift: float, scaling_factor: float
) -> list[float]:
    """Shift every value by ``shift`` and multiply it by ``scaling_factor``."""
    return [(x - shift) * scaling_factor for x in v]


def rescale_and_invert_vector(
    v: Iterable[float], shift: float, scaling_factor: float
) -> list[float]:
    """Rescale the values, then mirror them so the minimum becomes the maximum."""
    return [(y - 1.0) * -1.0 for y in rescale_vector(v, shift, scaling_factor)]


def autorescale_vector(v: Sequence[float], inverted: bool) -> list[float]:
    """Map the values linearly so that their minimum is 0 and maximum is 1.

    With ``inverted`` the mapping is mirrored: the minimum goes to 1 and the
    maximum to 0. A vector whose values are all equal yields NaN entries.

    Raises ValueError if the vector is empty or holds NaN.
    """
    values = [float(x) for x in v]
    if not values:
        raise ValueError("cannot rescale an empty vector")
    if any(math.isnan(x) for x in values):
        raise ValueError("cannot rescale a vector holding NaN")
    shift = min(values)
    span = max(values) - shift
    scaling_factor = math.inf if span == 0 else 1.0 / span
    if inverted:
        return rescale_and_invert_vector(values, shift, scaling_factor)
    return rescale_vector(values, shift, scaling_factor)