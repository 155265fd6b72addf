"""Zoo dataset records and readers for the whitespace and CSV file formats."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

NUM_FEATURES = 16
NUM_SAMPLES = 100
NUM_CLASSES = 7
NUM_TEST_DATA = 20
MAX_LENGTH_ANIMAL_NAME = 50

_RECORD_WIDTH = NUM_FEATURES + 2


@dataclass(frozen=True)
class Animal:
    """One animal: its name, its feature vector and its class label."""

    name: str
    features: tuple[int, ...]
    class_label: int

    def __post_init__(self) -> None:
        features = tuple(int(value) for value in self.features)
        if len(features) != NUM_FEATURES:
            raise ValueError(
                f"expected {NUM_FEATURES} features, got {len(features)}"
            )
        object.__setattr__(self, "features", features)


def _parse_record(tokens: Sequence[str]) -> Animal:
    if len(tokens) != _RECORD_WIDTH:
        raise ValueError(
            f"expected {_RECORD_WIDTH} fields per record, got {len(tokens)}"
        )
    name, *values = tokens
    try:
        numbers = [int(value) for value in values]
    except ValueError as exc:
        raise ValueError(f"bad numeric field in record for {name!r}") from exc
    return Animal(name, tuple(numbers[:NUM_FEATURES]), numbers[NUM_FEATURES])


def _chunks(tokens: list[str], size: int) -> Iterable[list[str]]:
    for start in range(0, len(tokens), size):
        yield tokens[start:start + size]


def read_zoo_file(path: str | Path) -> list[Animal]:
    """Read whitespace-separated records: name, 16 features, class label.

    Raises FileNotFoundError if the file is missing and ValueError if a
    record is incomplete or holds a non-integer value.
    """
    tokens = Path(path).read_text().split()
    if len(tokens) % _RECORD_WIDTH:
        raise ValueError("file ends with an incomplete record")
    return [_parse_record(chunk) for chunk in _chunks(tokens, _RECORD_WIDTH)]


def read_test_csv(path: str | Path) -> list[Animal]:
    """Read comma-separated records, one per line; blank lines are skipped."""
    animals = []
    with open(path) as handle:
        for line in handle:
            tokens = line.replace(",", " ").split()
            if tokens:
                animals.append(_parse_record(tokens))
    return animals