"""Console script for linkdist."""
import logging
import sys

logging.basicConfig(
    stream=sys.stderr,
    level=logging.INFO,
    format="%(asctime)s %(levelname)s: %(message)s",
)

import typer

from .barcode_table import barcode_multiplicity
from .intra_contig import calc_dist_samples
from .io import read_barcode_associations, read_contig_lengths, write_dist_samples, write_pair_stats, \
    read_dist_samples
from .pair_stats import calc_contig_pair_barcode_stats
from .parameters import ParameterSet
from .plotting import write_dist_samples_plot
from .similarity_index import SimilarityIndex

app = typer.Typer()


def get_params(min_mult, max_mult, min_reads, end_length, dist_bin_size):
    try:
        return ParameterSet(min_mult, max_mult, min_reads, end_length, dist_bin_size)
    except ValueError as e:
        raise typer.BadParameter(str(e))


@app.command()
def samples(contig_file_name: str, barcode_file_name: str, out_file_name: str,
            min_mult: int = 1, max_mult: int = 200, min_reads: int = 5, end_length: int = 30000,
            plot_file_name: str = None):
    """Write intra-contig distance samples for all contigs passing the length and read filters"""
    params = get_params(min_mult, max_mult, min_reads, end_length, 0.0)
    barcode_table = read_barcode_associations(barcode_file_name)
    contig_lengths = read_contig_lengths(contig_file_name)
    dist_samples = calc_dist_samples(barcode_table, contig_lengths, barcode_multiplicity(barcode_table), params)
    write_dist_samples(out_file_name, dist_samples)
    logging.info(f"Wrote {len(dist_samples)} distance samples to {out_file_name}")
    if plot_file_name is not None:
        write_dist_samples_plot(plot_file_name, dist_samples)


@app.command()
def pair_stats(contig_file_name: str, barcode_file_name: str, out_file_name: str,
               min_mult: int = 1, max_mult: int = 200, min_reads: int = 5, end_length: int = 30000):
    """Write shared barcode statistics for all candidate contig pairs"""
    params = get_params(min_mult, max_mult, min_reads, end_length, 0.0)
    barcode_table = read_barcode_associations(barcode_file_name)
    contig_lengths = read_contig_lengths(contig_file_name)
    stats = calc_contig_pair_barcode_stats(barcode_table, contig_lengths, barcode_multiplicity(barcode_table), params)
    write_pair_stats(out_file_name, stats)
    logging.info(f"Wrote statistics for {len(stats)} contig pairs to {out_file_name}")


@app.command()
def estimate(contig_file_name: str, barcode_file_name: str, out_file_name: str,
             min_mult: int = 1, max_mult: int = 200, min_reads: int = 5, end_length: int = 30000,
             dist_bin_size: float = 0.05, dist_samples_file_name: str = None, plot_file_name: str = None):
    """
    Estimate min/max distances between contig ends sharing barcodes. Distance samples are
    calculated from the input unless dist_samples_file_name points to a previous samples report
    """
    params = get_params(min_mult, max_mult, min_reads, end_length, dist_bin_size)
    barcode_table = read_barcode_associations(barcode_file_name)
    contig_lengths = read_contig_lengths(contig_file_name)
    multiplicity = barcode_multiplicity(barcode_table)
    if dist_samples_file_name is not None:
        dist_samples = read_dist_samples(dist_samples_file_name)
        logging.info(f"Read {len(dist_samples)} distance samples from {dist_samples_file_name}")
    else:
        dist_samples = calc_dist_samples(barcode_table, contig_lengths, multiplicity, params)
    if plot_file_name is not None:
        write_dist_samples_plot(plot_file_name, dist_samples)
    similarity_index = SimilarityIndex.from_samples(dist_samples)
    stats = calc_contig_pair_barcode_stats(barcode_table, contig_lengths, multiplicity, params)
    write_pair_stats(out_file_name, stats, similarity_index, params)
    logging.info(f"Wrote distance estimates for {len(stats)} contig pairs to {out_file_name}")


def main():
    app()


if __name__ == "__main__":
    main()
