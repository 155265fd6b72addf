"""k-nearest-neighbour classification over the zoo dataset."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from enum import IntEnum

from zooknn.dataset import NUM_CLASSES, Animal
from zooknn.distance import distance_functions


class DistanceMetric(IntEnum):
    """Which measure ranks the neighbours."""

    EUCLIDEAN = 1
    HAMMING = 2
    JACCARD = 3


def find_k_nearest_neighbors(
    data_zoo: Sequence[Animal],
    new_sample: Sequence[int],
    k: int,
    metric: DistanceMetric | int,
) -> list[int]:
    """Return the indices of the k samples closest to new_sample.

    Distances rank ascending, Jaccard similarity descending; ties keep
    dataset order.
    """
    metric = DistanceMetric(metric)
    if not 1 <= k <= len(data_zoo):
        raise ValueError(f"k must be between 1 and {len(data_zoo)}, got {k}")
    results = [distance_functions(animal.features, new_sample) for animal in data_zoo]
    if metric is DistanceMetric.EUCLIDEAN:
        keys = [r.euclidean for r in results]
    elif metric is DistanceMetric.HAMMING:
        keys = [r.hamming for r in results]
    else:
        keys = [r.jaccard for r in results]
    order = sorted(
        range(len(data_zoo)),
        key=keys.__getitem__,
        reverse=metric is DistanceMetric.JACCARD,
    )
    return order[:k]


def predict_class(
    data_zoo: Sequence[Animal],
    new_sample: Sequence[int],
    metric: DistanceMetric | int,
    k: int,
) -> int:
    """Return the most frequent label among the k nearest neighbours.

    Ties go to the lowest label.
    """
    neighbours = find_k_nearest_neighbors(data_zoo, new_sample, k, metric)
    counts = Counter(data_zoo[index].class_label for index in neighbours)
    for label in counts:
        if not 1 <= label <= NUM_CLASSES:
            raise ValueError(f"class label {label} outside 1..{NUM_CLASSES}")
    return min(counts, key=lambda label: (-counts[label], label))


def find_accuracy(
    data_zoo: Sequence[Animal],
    metric: DistanceMetric | int,
    test_data: Sequence[Animal],
    k: int,
) -> float:
    """Return the fraction of test samples whose label is predicted correctly."""
    if not test_data:
        raise ValueError("no test data")
    correct = sum(
        predict_class(data_zoo, sample.features, metric, k) == sample.class_label
        for sample in test_data
    )
    return correct / len(test_data)