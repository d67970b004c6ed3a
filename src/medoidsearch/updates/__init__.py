"""Cluster representative (medoid) updates."""

from .medoid import cluster_permutations, update_cluster, update_configuration

__all__ = [
    'cluster_permutations',
    'update_cluster',
    'update_configuration'
]
