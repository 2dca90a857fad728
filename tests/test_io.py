import pandas as pd
import pytest

from linkdist.datatypes import IntraContigSample
from linkdist.graph_objects import ContigEnd, ContigEndPair, Orientation
from linkdist.io import write_dist_samples, read_dist_samples, read_barcode_associations, read_contig_lengths, \
    pair_stats_to_dataframe, DIST_SAMPLE_COLUMNS
from linkdist.pair_stats import PairwiseStatisticsTable
from linkdist.parameters import ParameterSet
from linkdist.similarity_index import SimilarityIndex


@pytest.fixture
def dist_samples():
    return {'contig1': IntraContigSample(100, 2, 3, 4, 1),
            'contig2': IntraContigSample(0, 1, 0, 1, 0)}


@pytest.fixture
def barcode_file(tmp_path):
    file_name = tmp_path / 'barcodes.tsv'
    file_name.write_text('barcode\tcontig_id\tend\tread_pairs\n'
                         'AAAC-1\tcontig1\thead\t3\n'
                         'AAAC-1\tcontig1\ttail\t2\n'
                         'AAAG-1\tcontig2\tT\t7\n')
    return file_name


@pytest.fixture
def pair_stats():
    stats = PairwiseStatisticsTable()
    stats.register_shared_barcode(ContigEndPair(ContigEnd('A', True), ContigEnd('B', True)))
    stats.finalize({ContigEnd('A', True): 2, ContigEnd('A', False): 1,
                    ContigEnd('B', True): 2, ContigEnd('B', False): 0})
    return stats


def test_dist_samples_report(tmp_path, dist_samples):
    file_name = tmp_path / 'samples.tsv'
    write_dist_samples(file_name, dist_samples)
    lines = file_name.read_text().splitlines()
    assert lines[0].split('\t') == DIST_SAMPLE_COLUMNS
    assert lines[1].split('\t') == ['contig1', '100', '2', '3', '4', '1']
    assert read_dist_samples(file_name) == dist_samples


def test_read_barcode_associations(barcode_file):
    barcode_table = read_barcode_associations(barcode_file)
    assert barcode_table == {'AAAC-1': {ContigEnd('contig1', True): 3, ContigEnd('contig1', False): 2},
                             'AAAG-1': {ContigEnd('contig2', False): 7}}


def test_read_barcode_associations_invalid_end(tmp_path):
    file_name = tmp_path / 'barcodes.tsv'
    file_name.write_text('barcode\tcontig_id\tend\tread_pairs\n'
                         'AAAC-1\tcontig1\tmiddle\t3\n')
    with pytest.raises(ValueError):
        read_barcode_associations(file_name)


def test_read_barcode_associations_missing_column(tmp_path):
    file_name = tmp_path / 'barcodes.tsv'
    file_name.write_text('barcode\tcontig_id\tread_pairs\n'
                         'AAAC-1\tcontig1\t3\n')
    with pytest.raises(ValueError):
        read_barcode_associations(file_name)


def test_read_contig_lengths(tmp_path):
    file_name = tmp_path / 'contigs.fa'
    file_name.write_text('>contig1\nACGTACGTAC\n>contig_2\nACG\n')
    assert read_contig_lengths(str(file_name)) == {'contig1': 10, 'contig_2': 3}


def test_pair_stats_without_estimates(pair_stats):
    df = pair_stats_to_dataframe(pair_stats)
    assert list(df['orientation']) == [o.name for o in Orientation]
    head_head = df.iloc[int(Orientation.HH)]
    assert (head_head.barcodes1, head_head.barcodes2, head_head.barcodes_intersect, head_head.barcodes_union) == \
           (2, 2, 1, 3)
    assert df['min_dist'].isna().all()


def test_pair_stats_with_estimates(pair_stats):
    similarity_index = SimilarityIndex.from_samples([IntraContigSample(100, 2, 2, 3, 1)])
    params = ParameterSet(dist_bin_size=0.01)
    df = pair_stats_to_dataframe(pair_stats, similarity_index, params)
    assert df['min_dist'].iloc[int(Orientation.HH)] == 100
    assert df['max_dist'].iloc[int(Orientation.HH)] == 100
    assert pd.isna(df['min_dist'].iloc[int(Orientation.TT)])


def test_pair_stats_default_params(pair_stats):
    similarity_index = SimilarityIndex.from_samples([IntraContigSample(100, 2, 2, 3, 1)])
    df = pair_stats_to_dataframe(pair_stats, similarity_index)
    assert df['min_dist'].iloc[int(Orientation.HH)] == 100


def test_read_barcode_associations_na_names(tmp_path):
    file_name = tmp_path / 'barcodes.tsv'
    file_name.write_text('barcode\tcontig_id\tend\tread_pairs\n'
                         'ACGT\tNA\thead\t3\n'
                         'nan\tnull\ttail\t2\n')
    barcode_table = read_barcode_associations(file_name)
    assert barcode_table == {'ACGT': {ContigEnd('NA', True): 3},
                             'nan': {ContigEnd('null', False): 2}}


def test_dist_samples_na_contig(tmp_path):
    file_name = tmp_path / 'samples.tsv'
    dist_samples = {'NA': IntraContigSample(10, 1, 1, 1, 1)}
    write_dist_samples(file_name, dist_samples)
    assert read_dist_samples(file_name) == dist_samples
