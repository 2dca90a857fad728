import logging
from typing import Dict

from .barcode_table import BarcodeAssociationTable, ContigLengths, BarcodeMultiplicity, filtered_barcodes
from .datatypes import IntraContigSample
from .parameters import ParameterSet

DistSampleMap = Dict[str, IntraContigSample]


def calc_dist_samples(barcode_table: BarcodeAssociationTable, contig_lengths: ContigLengths,
                      multiplicity: BarcodeMultiplicity, params: ParameterSet) -> DistSampleMap:
    """
    Measures barcode intersection and union sizes between the head and tail
    regions of each contig, paired with the known distance between the regions.

    A barcode found at both ends with enough read pairs is counted once in the
    union and once in the intersection. The intersection is counted when the
    head is visited so that the tail does not count it again.
    """
    dist_samples = {}
    for barcode, contig_end_counts in filtered_barcodes(barcode_table, multiplicity, params):
        for contig_end, read_pairs in contig_end_counts.items():
            if read_pairs < params.min_reads:
                continue
            length = contig_lengths[contig_end.contig_id]
            if length < params.min_contig_length:
                continue
            sample = dist_samples.setdefault(contig_end.contig_id, IntraContigSample())
            sample.distance = length - params.min_contig_length
            if contig_end.is_head:
                sample.barcodes_head += 1
            else:
                sample.barcodes_tail += 1
            found_other = contig_end_counts.get(contig_end.other_end(), -1) >= params.min_reads
            if found_other and contig_end.is_head:
                sample.barcodes_intersect += 1
                sample.barcodes_union += 1
            elif not found_other:
                sample.barcodes_union += 1
    logging.info(f"Created {len(dist_samples)} intra-contig distance samples")
    return dist_samples
