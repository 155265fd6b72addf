# zooknn

A small k-nearest-neighbour classifier for the zoo animal dataset. Each animal
has a name, 16 integer features and a class label from 1 to 7. Neighbours can
be ranked by Euclidean distance, Hamming distance or Jaccard similarity.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
zooknn a1Data.txt
zooknn a1Data.txt --test-data other.csv
```

The program shows a menu and reads choices between 1 and 5 from standard input:

1. Load the whitespace-separated dataset named on the command line and print it,
   one animal per line.
2. Print the Euclidean distance, Hamming distance and Jaccard similarity of two
   fixed feature vectors.
3. Print the indices of the 5 nearest neighbours of a fixed sample for each measure.
4. Print the predicted class of that sample for each measure.
5. Read the comma-separated test data (`testData.csv` in the current directory,
   or the file given with `--test-data`) and print the accuracy on it for each
   measure. If that file does not exist, the accuracy is printed as `-1.000000`.

Choice 1 has to come first. A choice outside 1 to 5, input that is not an
integer, the end of input, or choices 2 to 5 before the data is loaded end the
program. It also ends, after printing `File does not exist`, if the dataset file
cannot be opened.

## Data files

- The dataset file (`read_zoo_file`) holds whitespace-separated records: a name,
  16 integer features and a class label. A record that is cut short or holds a
  non-integer value raises `ValueError`; a missing file raises
  `FileNotFoundError`.
- The test file (`read_test_csv`) holds one comma-separated record per line in
  the same field order. Blank lines are skipped.

Both return lists of `Animal` records with the fields `name`, `features` and
`class_label`.

## Library use

```python
from zooknn.dataset import read_zoo_file, read_test_csv
from zooknn.distance import distance_functions
from zooknn.classifier import (
    DistanceMetric,
    find_k_nearest_neighbors,
    predict_class,
    find_accuracy,
)

zoo = read_zoo_file("a1Data.txt")
sample = [1, 1, 1, 0, 1, 0, 1, 1, 1, 0, 0, 0, 0, 1, 1, 1]

d = distance_functions(sample, zoo[0].features)
print(d.euclidean, d.hamming, d.jaccard)

print(find_k_nearest_neighbors(zoo, sample, 5, DistanceMetric.HAMMING))
print(predict_class(zoo, sample, DistanceMetric.JACCARD, 5))

tests = read_test_csv("testData.csv")
print(find_accuracy(zoo, DistanceMetric.EUCLIDEAN, tests, 5))
```

Notes on behaviour:

- `distance_functions` returns a `Distances` record. The Jaccard similarity
  counts positions where both vectors are 1 over the positions where not both
  are 0; it is NaN when both vectors are all zeros. Vectors of different length
  raise `ValueError`.
- `find_k_nearest_neighbors` ranks distances ascending and Jaccard similarity
  descending; ties keep the dataset's order. `k` must be between 1 and the size
  of the dataset, otherwise `ValueError` is raised. The metric may be given as a
  `DistanceMetric` or as the integers 1, 2 and 3.
- `predict_class` returns the most frequent label among the neighbours; a tied
  vote goes to the lower class label. Labels outside 1 to 7 raise `ValueError`.
- `find_accuracy` returns the fraction of test samples predicted correctly and
  raises `ValueError` when the test data is empty.