"""
Medoid re-selection.

Every element of a cluster is tried as its medoid; the candidate with the
lowest cost wins. Member order carries no meaning, so the n rotations of
``[medoid] + members`` cover every distinct choice of medoid without
enumerating all n! orderings.
"""

from typing import List

from ..base.data_structures import Cluster, Configuration, Metric, cluster_cost


def cluster_permutations(cluster: Cluster) -> List[Cluster]:
    """All candidate clusters obtained by rotating the medoid position.

    The first candidate is the cluster's current arrangement.
    """
    ring = cluster.elements
    n = len(ring)
    candidates = []
    for i in range(n):
        candidates.append(Cluster(ring[i], ring[i + 1:] + ring[:i]))
    return candidates


def update_cluster(metric: Metric, cluster: Cluster) -> Cluster:
    """Cheapest candidate from ``cluster_permutations``.

    Ties keep the earliest candidate, so an unchanged medoid survives any
    tie with an alternative.
    """
    candidates = cluster_permutations(cluster)
    best = candidates[0]
    best_cost = cluster_cost(metric, best)
    for candidate in candidates[1:]:
        c = cluster_cost(metric, candidate)
        if c < best_cost:
            best = candidate
            best_cost = c
    return best


def update_configuration(metric: Metric, configuration: Configuration) -> Configuration:
    """Apply ``update_cluster`` to every cluster independently."""
    return Configuration(tuple(update_cluster(metric, c) for c in configuration))
