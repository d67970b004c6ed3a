"""Clustering algorithm implementations."""

from .search import (
    kmedoids_iteration,
    run_local_search,
    local_search,
    seed_configuration,
    kmedoids
)
from .estimator import KMedoids

__all__ = [
    'kmedoids_iteration',
    'run_local_search',
    'local_search',
    'seed_configuration',
    'kmedoids',
    'KMedoids'
]
