"""Distance metrics and precomputed dissimilarities."""

from .euclidean import (
    squared_euclidean,
    euclidean,
    manhattan,
    cosine_distance,
    absolute_difference
)
from .precomputed import PrecomputedMetric, pairwise_dissimilarities
from .registry import METRICS, get_metric

__all__ = [
    # Vector metrics
    'squared_euclidean',
    'euclidean',
    'manhattan',
    'cosine_distance',
    'absolute_difference',

    # Precomputed
    'PrecomputedMetric',
    'pairwise_dissimilarities',

    # Lookup
    'METRICS',
    'get_metric'
]
