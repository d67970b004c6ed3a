"""Utility functions for the k-medoids engine."""

from .convergence import NoImprovement

from .metrics import (
    configuration_cost,
    cluster_costs,
    labels,
    silhouette_score
)

from .validation import (
    check_n_clusters,
    check_positive_int,
    check_metric,
    check_random_state,
    check_elements,
    check_medoid_indices
)

__all__ = [
    # Convergence criteria
    'NoImprovement',

    # Metrics
    'configuration_cost',
    'cluster_costs',
    'labels',
    'silhouette_score',

    # Validation
    'check_n_clusters',
    'check_positive_int',
    'check_metric',
    'check_random_state',
    'check_elements',
    'check_medoid_indices'
]
