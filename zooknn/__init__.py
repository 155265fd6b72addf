"""k-nearest-neighbour classification of zoo animals by Euclidean, Hamming or Jaccard measures."""

__version__ = "0.1.0"