"""Interactive menu for loading the zoo data and running the classifier."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence

from zooknn.classifier import (
    DistanceMetric,
    find_accuracy,
    find_k_nearest_neighbors,
    predict_class,
)
from zooknn.dataset import Animal, read_test_csv, read_zoo_file
from zooknn.distance import distance_functions

VECTOR1 = (1, 1, 1, 0, 1, 0, 1, 1, 1, 0, 0, 0, 0, 1, 1, 1)
VECTOR2 = (1, 0, 0, 1, 0, 0, 1, 1, 1, 1, 0, 0, 4, 0, 0, 1)
NEW_SAMPLE = (1, 1, 1, 0, 1, 0, 1, 1, 1, 0, 0, 0, 0, 1, 1, 1)
K = 5
TEST_DATA_FILE = "testData.csv"

_MENU = "Here is the menu - enter a number between 1 and 5\n"
_PROMPT = "Enter your choice: "

_METRIC_NAMES = {
    DistanceMetric.EUCLIDEAN: "Euclidean Distance",
    DistanceMetric.HAMMING: "Hamming Distance",
    DistanceMetric.JACCARD: "Jaccard Similarity",
}


def _menu_choices(stream: Iterable[str]) -> Iterator[int]:
    """Show the menu before each read and yield the integers entered.

    Stops at end of input or at the first token that is not an integer.
    """
    tokens = (token for line in stream for token in line.split())
    while True:
        print(_MENU)
        print(_PROMPT, end="", flush=True)
        token = next(tokens, None)
        if token is None:
            return
        try:
            choice = int(token)
        except ValueError:
            return
        yield choice


def _show_data(data_zoo: Sequence[Animal]) -> None:
    for animal in data_zoo:
        fields = [animal.name, *map(str, animal.features), str(animal.class_label)]
        print("".join(f"{field} " for field in fields))


def _show_distances() -> None:
    result = distance_functions(VECTOR1, VECTOR2)
    print(f"Eculidean Distance = {result.euclidean:f}")
    print(f"Hamming Distance = {result.hamming}")
    print(f"Jaccard Similarity = {result.jaccard:f}\n")


def _show_neighbours(data_zoo: Sequence[Animal]) -> None:
    for metric in DistanceMetric:
        neighbours = find_k_nearest_neighbors(data_zoo, NEW_SAMPLE, K, metric)
        listed = "".join(f"{index} " for index in neighbours)
        print(f"Nearest neighbors for new sample with {_METRIC_NAMES[metric]}: {listed}")


def _show_predictions(data_zoo: Sequence[Animal]) -> None:
    for metric in DistanceMetric:
        print(f"The predicted class is: {predict_class(data_zoo, NEW_SAMPLE, metric, K)}")
    print()


def _show_accuracy(data_zoo: Sequence[Animal], test_path: str) -> None:
    try:
        test_data = read_test_csv(test_path)
    except FileNotFoundError:
        test_data = None
    for metric in DistanceMetric:
        accuracy = -1.0 if test_data is None else find_accuracy(data_zoo, metric, test_data, K)
        print(f"The accuracy for the test data is {accuracy:f}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the menu loop; choice 1 must come before choices 2 to 5."""
    parser = argparse.ArgumentParser(prog="zooknn")
    parser.add_argument("dataset", help="whitespace-separated zoo data file")
    parser.add_argument(
        "--test-data", default=TEST_DATA_FILE, help="comma-separated test data file"
    )
    args = parser.parse_args(argv)

    data_zoo: list[Animal] | None = None
    for choice in _menu_choices(sys.stdin):
        if not 1 <= choice <= 5:
            break
        if choice == 1:
            try:
                data_zoo = read_zoo_file(args.dataset)
            except FileNotFoundError:
                print("File does not exist")
                break
            _show_data(data_zoo)
        elif data_zoo is None:
            break
        elif choice == 2:
            _show_distances()
        elif choice == 3:
            _show_neighbours(data_zoo)
        elif choice == 4:
            _show_predictions(data_zoo)
        else:
            _show_accuracy(data_zoo, args.test_data)
    return 0


if __name__ == "__main__":
    sys.exit(main())