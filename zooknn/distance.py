"""Distance and similarity measures between two feature vectors."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Distances:
    """Euclidean distance, Hamming distance and Jaccard similarity."""

    euclidean: float
    hamming: int
    jaccard: float


def distance_functions(vector1: Sequence[int], vector2: Sequence[int]) -> Distances:
    """Compare two equally long integer vectors.

    The Jaccard similarity counts positions where both are 1 over the
    positions where not both are 0; it is NaN when both are all zeros.
    """
    if len(vector1) != len(vector2):
        raise ValueError("vectors differ in length")
    pairs = list(zip(vector1, vector2))
    euclidean = math.sqrt(sum((a - b) ** 2 for a, b in pairs))
    hamming = sum(a != b for a, b in pairs)
    both_one = sum(a == 1 and b == 1 for a, b in pairs)
    both_zero = sum(a == 0 and b == 0 for a, b in pairs)
    denominator = len(pairs) - both_zero
    if denominator:
        jaccard = both_one / denominator
    else:
        jaccard = math.nan if both_one == 0 else math.copysign(math.inf, both_one)
    return Distances(euclidean, hamming, jaccard)