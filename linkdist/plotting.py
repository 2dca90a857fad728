import logging

import plotly.express as px

from .intra_contig import DistSampleMap
from .io import dist_samples_to_dataframe


def plot_dist_samples(dist_samples: DistSampleMap, title='Intra-contig distance samples'):
    """Scatter of barcode Jaccard index against head-to-tail distance, one point per contig"""
    df = dist_samples_to_dataframe(dist_samples)
    df['jaccard'] = df['barcodes_intersect'] / df['barcodes_union']
    return px.scatter(df, x='jaccard', y='distance', hover_name='contig_id',
                      hover_data=['barcodes_head', 'barcodes_tail'], title=title)


def write_dist_samples_plot(file_name: str, dist_samples: DistSampleMap):
    fig = plot_dist_samples(dist_samples)
    fig.write_html(file_name)
    logging.info(f"Wrote distance sample plot to {file_name}")
    return fig
