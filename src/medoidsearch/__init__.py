"""
medoidsearch: generic k-medoids clustering by greedy local search.

Elements can be anything; the only requirement is a pairwise
dissimilarity function. Each cluster is represented by one of its own
members (its medoid), and the search stops at the first iteration that
does not lower the total medoid-to-member dissimilarity.

Example usage:
    >>> from medoidsearch import kmedoids, configuration_cost
    >>>
    >>> metric = lambda x, y: (x - y) ** 2
    >>> result = kmedoids(3, metric, [2, 5, 7, 1, 3, 4, 6, 8, 9])
    >>> sorted(result.medoids)
    [2, 5, 8]
    >>> configuration_cost(metric, result)
    6
"""

__version__ = '0.1.0'

# Functional core
from .base import (
    Cluster,
    Configuration,
    SearchState,
    new_cluster,
    add_element,
    distance_to,
    cluster_cost,
    decluster,
    deconfigure,
    MedoidSearchError,
    EmptyConfigurationError,
    InvalidArgumentError
)
from .assignments import nearest_cluster, assign_element, assign_elements
from .updates import cluster_permutations, update_cluster, update_configuration
from .algorithms import (
    kmedoids_iteration,
    run_local_search,
    local_search,
    kmedoids,
    KMedoids
)

# Convenience imports
from .initialization import FirstKInit, RandomInit, KMedoidsPlusPlusInit
from .distances import PrecomputedMetric, get_metric
from .utils import NoImprovement, configuration_cost, cluster_costs, silhouette_score

__all__ = [
    # Data model
    'Cluster',
    'Configuration',
    'SearchState',
    'new_cluster',
    'add_element',
    'distance_to',
    'cluster_cost',
    'decluster',
    'deconfigure',

    # Assignment and update
    'nearest_cluster',
    'assign_element',
    'assign_elements',
    'cluster_permutations',
    'update_cluster',
    'update_configuration',

    # Search
    'kmedoids_iteration',
    'run_local_search',
    'local_search',
    'kmedoids',
    'KMedoids',

    # Seeding
    'FirstKInit',
    'RandomInit',
    'KMedoidsPlusPlusInit',

    # Metrics and convergence
    'PrecomputedMetric',
    'get_metric',
    'NoImprovement',
    'configuration_cost',
    'cluster_costs',
    'silhouette_score',

    # Errors
    'MedoidSearchError',
    'EmptyConfigurationError',
    'InvalidArgumentError',

    # Version
    '__version__'
]
