from dataclasses import dataclass


@dataclass(frozen=True)
class ParameterSet:
    """
    Thresholds shared by every stage of the estimation.

    min_mult/max_mult bound (inclusively) the number of contig ends a barcode
    may touch, min_reads is the read pair support needed for a barcode to count
    at a contig end, end_length is the size of the region used at each end and
    dist_bin_size is the half-width of the Jaccard window used when estimating.
    """
    min_mult: int = 1
    max_mult: int = 200
    min_reads: int = 5
    end_length: int = 30000
    dist_bin_size: float = 0.05

    def __post_init__(self):
        if self.min_mult < 0 or self.min_mult > self.max_mult:
            raise ValueError(f"Invalid multiplicity range: [{self.min_mult}, {self.max_mult}]")
        if self.min_reads < 0:
            raise ValueError(f"min_reads must be non-negative, got {self.min_reads}")
        if self.end_length < 0:
            raise ValueError(f"end_length must be non-negative, got {self.end_length}")
        if self.dist_bin_size < 0:
            raise ValueError(f"dist_bin_size must be non-negative, got {self.dist_bin_size}")

    @property
    def min_contig_length(self) -> int:
        return 2 * self.end_length
