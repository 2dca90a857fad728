import logging
from collections import Counter
from functools import singledispatchmethod
from typing import Dict, List, Tuple, Iterator

from .barcode_table import BarcodeAssociationTable, ContigLengths, BarcodeMultiplicity, filtered_barcodes, \
    is_valid_mapping
from .datatypes import PairwiseOrientationRecord
from .graph_objects import ContigEnd, ContigEndPair, Orientation
from .parameters import ParameterSet

ContigPair = Tuple[str, str]


class PairwiseStatisticsTable:
    """
    Shared barcode statistics for candidate contig pairs. Pairs are stored with
    the lexicographically smaller contig id first, with one record per orientation
    """

    def __init__(self, records: Dict[ContigPair, List[PairwiseOrientationRecord]] = None):
        self._records = {} if records is None else records

    @staticmethod
    def canonical_pair(contig_pair: ContigPair) -> ContigPair:
        a, b = contig_pair
        return (a, b) if a <= b else (b, a)

    def _init_pair(self, contig_pair: ContigPair) -> List[PairwiseOrientationRecord]:
        assert contig_pair[0] <= contig_pair[1], contig_pair
        if contig_pair not in self._records:
            self._records[contig_pair] = [PairwiseOrientationRecord() for _ in Orientation]
        return self._records[contig_pair]

    def register_shared_barcode(self, pair: ContigEndPair):
        self._init_pair(pair.contig_pair)[pair.orientation].barcodes_intersect += 1

    def keys(self):
        return self._records.keys()

    def items(self):
        return self._records.items()

    def __iter__(self):
        return iter(self._records)

    def __len__(self):
        return len(self._records)

    def __contains__(self, contig_pair):
        return self.canonical_pair(contig_pair) in self._records

    @singledispatchmethod
    def __getitem__(self, key):
        raise ValueError(f"Invalid index for {self.__class__.__name__}: {key}")

    @__getitem__.register
    def _(self, contig_pair: tuple):
        return self._records[contig_pair]

    @__getitem__.register
    def _(self, pair: ContigEndPair):
        pair = pair.canonical()
        return self._records[pair.contig_pair][pair.orientation]

    def orientation_records(self) -> Iterator[Tuple[ContigPair, Orientation, PairwiseOrientationRecord]]:
        for contig_pair, records in self._records.items():
            for orientation in Orientation:
                yield contig_pair, orientation, records[orientation]

    def finalize(self, barcodes_per_end: Counter):
        """Fill in the per-end barcode counts and union sizes for every record"""
        for contig_pair, orientation, record in self.orientation_records():
            pair = ContigEndPair.from_orientation(contig_pair, orientation)
            record.set_end_counts(barcodes_per_end[pair.end_a], barcodes_per_end[pair.end_b])


def calc_contig_pair_barcode_stats(barcode_table: BarcodeAssociationTable, contig_lengths: ContigLengths,
                                   multiplicity: BarcodeMultiplicity, params: ParameterSet) -> PairwiseStatisticsTable:
    """
    Counts the shared barcodes between every pair of valid contig ends observed under
    the same barcode, as well as the number of distinct barcodes at each valid end.

    Two ends of the same contig are also paired. An end is never paired with itself.
    """
    table = PairwiseStatisticsTable()
    barcodes_per_end = Counter()
    for barcode, contig_end_counts in filtered_barcodes(barcode_table, multiplicity, params):
        valid_ends = [contig_end for contig_end, read_pairs in contig_end_counts.items()
                      if is_valid_mapping(contig_lengths[contig_end.contig_id], read_pairs, params)]
        barcodes_per_end.update(valid_ends)
        for end_a in valid_ends:
            for end_b in valid_ends:
                if end_a == end_b or end_a.contig_id > end_b.contig_id:
                    continue
                table.register_shared_barcode(ContigEndPair(end_a, end_b))
    table.finalize(barcodes_per_end)
    logging.info(f"Found {len(table)} contig pairs sharing barcodes "
                 f"({len(barcodes_per_end)} contig ends with valid barcode mappings)")
    return table
