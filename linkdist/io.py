import logging
from typing import Optional

import bionumpy as bnp
import numpy as np
import pandas as pd

from .barcode_table import BarcodeAssociationTable, ContigLengths, barcode_table_from_observations
from .datatypes import IntraContigSample
from .distance_estimation import estimate_distance
from .intra_contig import DistSampleMap
from .pair_stats import PairwiseStatisticsTable
from .parameters import ParameterSet
from .similarity_index import SimilarityIndex

DIST_SAMPLE_COLUMNS = ['contig_id', 'distance', 'barcodes_head', 'barcodes_tail',
                       'barcodes_union', 'barcodes_intersect']
PAIR_STATS_COLUMNS = ['contig_id1', 'contig_id2', 'orientation', 'barcodes1', 'barcodes2',
                      'barcodes_intersect', 'barcodes_union', 'min_dist', 'max_dist', 'jaccard']
BARCODE_COLUMNS = ['barcode', 'contig_id', 'end', 'read_pairs']
_end_names = {'head': True, 'h': True, 'tail': False, 't': False}


def read_contig_lengths(file_name: str) -> ContigLengths:
    """Contig lengths from a fasta (with index), .fai or chrom.sizes file"""
    chrom_sizes = bnp.Genome.from_file(file_name, filter_function=None).get_genome_context().chrom_sizes
    return {str(name): int(size) for name, size in chrom_sizes.items()}


def read_barcode_associations(file_name: str) -> BarcodeAssociationTable:
    """
    Reads a tab separated file with columns barcode, contig_id, end and read_pairs,
    where end is one of head/tail (or h/t)
    """
    df = pd.read_csv(file_name, sep='\t', dtype={'barcode': str, 'contig_id': str, 'end': str},
                     keep_default_na=False, na_filter=False)
    missing = set(BARCODE_COLUMNS) - set(df.columns)
    if missing:
        raise ValueError(f"Missing columns in {file_name}: {sorted(missing)}")
    ends = df['end'].str.lower()
    invalid = ~ends.isin(list(_end_names))
    if invalid.any():
        raise ValueError(f"Invalid contig end in {file_name}: {df['end'][invalid].iloc[0]}")
    observations = zip(df['barcode'], df['contig_id'], ends.map(_end_names), df['read_pairs'])
    barcode_table = barcode_table_from_observations(observations)
    logging.info(f"Read {len(df)} barcode mappings for {len(barcode_table)} barcodes from {file_name}")
    return barcode_table


def dist_samples_to_dataframe(dist_samples: DistSampleMap) -> pd.DataFrame:
    return pd.DataFrame([(contig_id, sample.distance, sample.barcodes_head, sample.barcodes_tail,
                          sample.barcodes_union, sample.barcodes_intersect)
                         for contig_id, sample in dist_samples.items()],
                        columns=DIST_SAMPLE_COLUMNS)


def write_dist_samples(file_name, dist_samples: DistSampleMap):
    dist_samples_to_dataframe(dist_samples).to_csv(file_name, sep='\t', index=False)


def read_dist_samples(file_name) -> DistSampleMap:
    df = pd.read_csv(file_name, sep='\t', dtype={'contig_id': str}, keep_default_na=False, na_filter=False)
    return {row.contig_id: IntraContigSample(int(row.distance), int(row.barcodes_head), int(row.barcodes_tail),
                                             int(row.barcodes_union), int(row.barcodes_intersect))
            for row in df.itertuples(index=False)}


def pair_stats_to_dataframe(pair_stats: PairwiseStatisticsTable, similarity_index: Optional[SimilarityIndex] = None,
                            params: Optional[ParameterSet] = None) -> pd.DataFrame:
    if similarity_index is None:
        similarity_index = SimilarityIndex.empty()
    if params is None:
        params = ParameterSet()
    rows = []
    for (contig_id1, contig_id2), orientation, record in pair_stats.orientation_records():
        estimate, success = estimate_distance(record, similarity_index, params)
        distance_columns = (estimate.min_dist, estimate.max_dist, estimate.jaccard) if success else (np.nan,) * 3
        rows.append((contig_id1, contig_id2, orientation.name, record.barcodes1, record.barcodes2,
                     record.barcodes_intersect, record.barcodes_union) + distance_columns)
    df = pd.DataFrame(rows, columns=PAIR_STATS_COLUMNS)
    return df.astype({'min_dist': 'Int64', 'max_dist': 'Int64'})


def write_pair_stats(file_name, pair_stats: PairwiseStatisticsTable, similarity_index: Optional[SimilarityIndex] = None,
                     params: Optional[ParameterSet] = None):
    pair_stats_to_dataframe(pair_stats, similarity_index, params).to_csv(file_name, sep='\t', index=False)
