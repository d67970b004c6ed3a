"""
Nearest-medoid assignment.

Each element joins the cluster whose medoid is least dissimilar to it.
Ties go to the first such cluster in configuration order, so results are
reproducible for a fixed input order.
"""

from typing import Any, Iterable, Tuple

from ..base.data_structures import (
    Cluster, Configuration, Metric, add_element, distance_to
)
from ..base.errors import EmptyConfigurationError


def nearest_cluster_index(metric: Metric, element: Any,
                          configuration: Configuration) -> int:
    """Index of the cluster whose medoid is nearest to ``element``; the first
    one wins ties."""
    if len(configuration) == 0:
        raise EmptyConfigurationError(
            "Cannot find the nearest cluster in an empty configuration")

    best_idx = 0
    best_distance = distance_to(metric, element, configuration[0])
    for idx in range(1, len(configuration)):
        d = distance_to(metric, element, configuration[idx])
        # Strict comparison keeps the earliest cluster on ties
        if d < best_distance:
            best_idx = idx
            best_distance = d
    return best_idx


def nearest_cluster(metric: Metric, element: Any,
                    configuration: Configuration) -> Tuple[Cluster, Configuration]:
    """Find the cluster whose medoid is nearest to ``element``.

    Args:
        metric: Pairwise dissimilarity function
        element: Element to place
        configuration: Candidate clusters

    Returns:
        (nearest cluster, remaining clusters in their original order)

    Raises:
        EmptyConfigurationError: If the configuration has no clusters
    """
    idx = nearest_cluster_index(metric, element, configuration)
    clusters = configuration.clusters
    return clusters[idx], Configuration(clusters[:idx] + clusters[idx + 1:])


def assign_element(metric: Metric, element: Any,
                   configuration: Configuration) -> Configuration:
    """Add ``element`` to its nearest cluster.

    The grown cluster keeps its position; every other cluster is carried
    over untouched and in order.
    """
    idx = nearest_cluster_index(metric, element, configuration)
    clusters = configuration.clusters
    grown = add_element(element, clusters[idx])
    return Configuration(clusters[:idx] + (grown,) + clusters[idx + 1:])


def assign_elements(metric: Metric, elements: Iterable[Any],
                    configuration: Configuration) -> Configuration:
    """Fold ``elements`` into the configuration left to right."""
    for element in elements:
        configuration = assign_element(metric, element, configuration)
    return configuration
