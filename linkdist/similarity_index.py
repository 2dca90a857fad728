from collections.abc import Mapping
from typing import Dict, Iterable, List, Tuple, Union

import numpy as np

from .datatypes import IntraContigSample


# keys within this of the window edge count as inside it
WINDOW_TOLERANCE = 1e-9


class SimilarityIndex:
    """
    Intra-contig distance samples ordered by the Jaccard index of their
    head/tail barcode sets. Several samples can share the same key.
    """

    def __init__(self, keys: np.ndarray, samples: List[IntraContigSample]):
        assert len(keys) == len(samples)
        assert np.all(np.diff(keys) >= 0), "Keys must be sorted"
        self._keys = keys
        self._samples = samples

    @classmethod
    def from_samples(cls, samples: Union[Dict[str, IntraContigSample], Iterable[IntraContigSample]]):
        if isinstance(samples, Mapping):
            samples = samples.values()
        samples = list(samples)
        keys = np.array([sample.jaccard for sample in samples], dtype=float)
        distances = np.array([sample.distance for sample in samples], dtype=np.int64)
        order = np.lexsort((distances, keys))
        return cls(keys[order], [samples[i] for i in order])

    @classmethod
    def empty(cls):
        return cls(np.zeros(0, dtype=float), [])

    def __len__(self):
        return len(self._samples)

    def __iter__(self):
        return zip(self._keys.tolist(), self._samples)

    @property
    def keys(self) -> np.ndarray:
        return self._keys

    def range(self, low: float, high: float) -> List[Tuple[float, IntraContigSample]]:
        """All entries with low <= key <= high"""
        start = np.searchsorted(self._keys, low, side='left')
        end = np.searchsorted(self._keys, high, side='right')
        return [(float(self._keys[i]), self._samples[i]) for i in range(start, end)]

    def closest_window(self, jaccard: float, half_width: float) -> Tuple[int, int]:
        """
        Returns [start, end) of the entries within half_width of jaccard (up to
        WINDOW_TOLERANCE for rounding of the key differences), found by
        expanding outward from the insertion point of jaccard
        """
        keys = self._keys
        start = end = int(np.searchsorted(keys, jaccard, side='left'))
        while start > 0 and jaccard - keys[start - 1] <= half_width + WINDOW_TOLERANCE:
            start -= 1
        while end < len(keys) and keys[end] - jaccard <= half_width + WINDOW_TOLERANCE:
            end += 1
        return start, end

    def closest_samples(self, jaccard: float, half_width: float) -> List[IntraContigSample]:
        start, end = self.closest_window(jaccard, half_width)
        return self._samples[start:end]

    def distances(self, jaccard: float, half_width: float) -> np.ndarray:
        return np.array([sample.distance for sample in self.closest_samples(jaccard, half_width)], dtype=np.int64)
