"""
Input tables shared by the sample builder and the pair statistics engine.

The barcode association table maps a barcode to the contig ends it was
observed on, keyed by ContigEnd, with the number of supporting read pairs.
"""
import logging
from collections import defaultdict
from typing import Dict, Iterable, Tuple

from .graph_objects import ContigEnd
from .parameters import ParameterSet

ContigEndCounts = Dict[ContigEnd, int]
BarcodeAssociationTable = Dict[str, ContigEndCounts]
ContigLengths = Dict[str, int]
BarcodeMultiplicity = Dict[str, int]


def barcode_multiplicity(barcode_table: BarcodeAssociationTable) -> BarcodeMultiplicity:
    """Number of distinct contig ends touched by each barcode"""
    return {barcode: len(contig_end_counts) for barcode, contig_end_counts in barcode_table.items()}


def has_valid_multiplicity(barcode: str, multiplicity: BarcodeMultiplicity, params: ParameterSet) -> bool:
    return params.min_mult <= multiplicity[barcode] <= params.max_mult


def is_valid_mapping(contig_length: int, read_pairs: int, params: ParameterSet) -> bool:
    """
    Whether a barcode-to-contig-end observation can be used for distance estimates.
    Contigs shorter than two end regions are excluded, since the samples
    rely on a uniform head/tail length
    """
    if read_pairs < params.min_reads:
        return False
    return contig_length >= params.min_contig_length


def filtered_barcodes(barcode_table: BarcodeAssociationTable, multiplicity: BarcodeMultiplicity,
                      params: ParameterSet) -> Iterable[Tuple[str, ContigEndCounts]]:
    n_skipped = 0
    for barcode, contig_end_counts in barcode_table.items():
        if not has_valid_multiplicity(barcode, multiplicity, params):
            n_skipped += 1
            continue
        yield barcode, contig_end_counts
    logging.info(f"Skipped {n_skipped} out of {len(barcode_table)} barcodes outside multiplicity range "
                 f"[{params.min_mult}, {params.max_mult}]")


def barcode_table_from_observations(observations: Iterable[Tuple[str, str, bool, int]]) -> BarcodeAssociationTable:
    """
    Builds the association table from (barcode, contig_id, is_head, read_pairs) tuples.
    Each contig end may only occur once per barcode
    """
    observations = list(observations)
    check_unique_contig_ends(observations)
    barcode_table = defaultdict(dict)
    for barcode, contig_id, is_head, read_pairs in observations:
        barcode_table[barcode][ContigEnd(contig_id, bool(is_head))] = int(read_pairs)
    return dict(barcode_table)


def check_unique_contig_ends(observations: Iterable[Tuple[str, str, bool, int]]):
    seen = set()
    for barcode, contig_id, is_head, _ in observations:
        key = (barcode, contig_id, bool(is_head))
        if key in seen:
            raise ValueError(f"Contig end {ContigEnd(contig_id, bool(is_head))} occurs more than once for barcode {barcode}")
        seen.add(key)
