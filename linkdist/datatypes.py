from dataclasses import dataclass


@dataclass
class IntraContigSample:
    """
    Barcode statistics for the head and tail regions of a single contig,
    together with the known distance between the two regions.
    """
    distance: int = 0
    barcodes_head: int = 0
    barcodes_tail: int = 0
    barcodes_union: int = 0
    barcodes_intersect: int = 0

    @property
    def jaccard(self) -> float:
        assert self.barcodes_union > 0, self
        return self.barcodes_intersect / self.barcodes_union


@dataclass
class PairwiseOrientationRecord:
    """Shared barcode counts for one end of each contig in a candidate pair"""
    barcodes1: int = 0
    barcodes2: int = 0
    barcodes_intersect: int = 0
    barcodes_union: int = 0

    def set_end_counts(self, barcodes1: int, barcodes2: int):
        if self.barcodes_intersect > 0:
            assert barcodes1 > 0 and barcodes2 > 0, (self, barcodes1, barcodes2)
        assert barcodes1 + barcodes2 >= self.barcodes_intersect, (self, barcodes1, barcodes2)
        self.barcodes1 = barcodes1
        self.barcodes2 = barcodes2
        self.barcodes_union = barcodes1 + barcodes2 - self.barcodes_intersect


@dataclass
class DistanceEstimate:
    min_dist: int = 0
    max_dist: int = 0
    jaccard: float = 0.0
