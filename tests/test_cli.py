import io

import pytest

from zooknn import cli
from zooknn.classifier import DistanceMetric, find_k_nearest_neighbors
from zooknn.dataset import NUM_FEATURES, Animal
from zooknn.distance import distance_functions


def _animals():
    return [
        Animal(f"animal{n}", tuple((n + i) % 2 for i in range(NUM_FEATURES)), 4)
        for n in range(6)
    ]


def _line(animal, sep=" "):
    return sep.join([animal.name, *map(str, animal.features), str(animal.class_label)])


@pytest.fixture
def dataset(tmp_path):
    path = tmp_path / "zoo.txt"
    path.write_text("\n".join(_line(a) for a in _animals()) + "\n")
    return path


def _run(monkeypatch, capsys, argv, stdin):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    status = cli.main(argv)
    return status, capsys.readouterr().out


def test_choice_one_prints_records(monkeypatch, capsys, dataset):
    status, out = _run(monkeypatch, capsys, [str(dataset)], "1\n0\n")
    assert status == 0
    for animal in _animals():
        assert (_line(animal) + " \n") in out


def test_missing_dataset(monkeypatch, capsys, tmp_path):
    _, out = _run(monkeypatch, capsys, [str(tmp_path / "none.txt")], "1\n2\n")
    assert "File does not exist" in out
    assert "Hamming Distance" not in out


def test_choice_before_loading_stops(monkeypatch, capsys, dataset):
    _, out = _run(monkeypatch, capsys, [str(dataset)], "2\n1\n")
    assert "Hamming Distance" not in out
    assert out.count("Enter your choice: ") == 1


def test_distances(monkeypatch, capsys, dataset):
    _, out = _run(monkeypatch, capsys, [str(dataset)], "1 2 0")
    result = distance_functions(cli.VECTOR1, cli.VECTOR2)
    assert f"Hamming Distance = {result.hamming}\n" in out
    assert f"Eculidean Distance = {result.euclidean:f}\n" in out


def test_neighbours(monkeypatch, capsys, dataset):
    _, out = _run(monkeypatch, capsys, [str(dataset)], "1\n3\n0\n")
    expected = find_k_nearest_neighbors(_animals(), cli.NEW_SAMPLE, cli.K, DistanceMetric.JACCARD)
    listed = "".join(f"{i} " for i in expected)
    assert f"Nearest neighbors for new sample with Jaccard Similarity: {listed}\n" in out


def test_predictions(monkeypatch, capsys, dataset):
    _, out = _run(monkeypatch, capsys, [str(dataset)], "1\n4\n0\n")
    label = _animals()[0].class_label
    assert out.count(f"The predicted class is: {label}\n") == 3


def test_accuracy(monkeypatch, capsys, dataset, tmp_path):
    csv = tmp_path / "testData.csv"
    csv.write_text("\n".join(_line(a, ",") for a in _animals()) + "\n")
    monkeypatch.chdir(tmp_path)
    _, out = _run(monkeypatch, capsys, [str(dataset)], "1\n5\n0\n")
    assert out.count("The accuracy for the test data is 1.000000\n") == 3


def test_accuracy_without_test_file(monkeypatch, capsys, dataset, tmp_path):
    _, out = _run(
        monkeypatch, capsys, [str(dataset), "--test-data", str(tmp_path / "no.csv")], "1\n5\n0\n"
    )
    assert out.count("The accuracy for the test data is -1.000000\n") == 3


def test_non_integer_input_ends(monkeypatch, capsys, dataset):
    status, out = _run(monkeypatch, capsys, [str(dataset)], "abc\n1\n")
    assert status == 0
    assert _animals()[0].name not in out