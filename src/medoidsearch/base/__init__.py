"""Base data model, interfaces and errors for the k-medoids engine."""

from .interfaces import (
    InitializationStrategy,
    ConvergenceCriterion
)

from .data_structures import (
    Cluster,
    Configuration,
    SearchState,
    Metric,
    new_cluster,
    add_element,
    distance_to,
    cluster_cost,
    decluster,
    deconfigure
)

from .errors import (
    MedoidSearchError,
    EmptyConfigurationError,
    InvalidArgumentError
)

__all__ = [
    # Interfaces
    'InitializationStrategy',
    'ConvergenceCriterion',

    # Data structures
    'Cluster',
    'Configuration',
    'SearchState',
    'Metric',

    # Cluster primitives
    'new_cluster',
    'add_element',
    'distance_to',
    'cluster_cost',
    'decluster',
    'deconfigure',

    # Errors
    'MedoidSearchError',
    'EmptyConfigurationError',
    'InvalidArgumentError'
]
