import logging
import math
from typing import Iterator, Tuple

import numpy as np

from .datatypes import DistanceEstimate, PairwiseOrientationRecord
from .graph_objects import ContigEndPair
from .pair_stats import PairwiseStatisticsTable
from .parameters import ParameterSet
from .similarity_index import SimilarityIndex


def quantile(sorted_values: np.ndarray, q: float) -> float:
    """
    Value at rank q*(N-1) of the sorted values, interpolating linearly
    between the two closest order statistics
    """
    assert len(sorted_values) > 0
    assert 0 <= q <= 1, q
    return float(np.quantile(sorted_values, q))


def estimate_distance(record: PairwiseOrientationRecord, similarity_index: SimilarityIndex,
                      params: ParameterSet) -> Tuple[DistanceEstimate, bool]:
    """
    Estimates min/max distance between two contig ends from the intra-contig
    samples with Jaccard index closest to that of the pair. The bounds are the
    1st and 99th percentile of the sample distances.

    Returns (estimate, False) when no estimate can be made.
    """
    result = DistanceEstimate()
    if len(similarity_index) == 0:
        return result, False
    # union is zero for pairs that never met the requirements (e.g. too short contigs)
    if record.barcodes_union == 0:
        return result, False
    result.jaccard = record.barcodes_intersect / record.barcodes_union
    assert 0.0 <= result.jaccard <= 1.0, record
    distances = np.sort(similarity_index.distances(result.jaccard, params.dist_bin_size))
    if len(distances) == 0:
        logging.debug(f"No intra-contig samples within {params.dist_bin_size} of jaccard {result.jaccard}")
        return result, False
    result.min_dist = int(math.floor(quantile(distances, 0.01)))
    result.max_dist = int(math.ceil(quantile(distances, 0.99)))
    return result, True


def estimate_all_distances(pair_stats: PairwiseStatisticsTable, similarity_index: SimilarityIndex,
                           params: ParameterSet) -> Iterator[Tuple[ContigEndPair, DistanceEstimate]]:
    n_failed = 0
    for contig_pair, orientation, record in pair_stats.orientation_records():
        estimate, success = estimate_distance(record, similarity_index, params)
        if not success:
            n_failed += 1
            continue
        yield ContigEndPair.from_orientation(contig_pair, orientation), estimate
    logging.info(f"No distance estimate available for {n_failed} contig end pairs")
