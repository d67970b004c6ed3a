"""
Clustering quality metrics.

The configuration cost is the quantity the local search minimizes; the
silhouette score is an internal diagnostic that needs nothing but the
metric itself.
"""

from typing import List
import torch

from ..base.data_structures import Configuration, Metric, cluster_cost
from ..distances.precomputed import pairwise_dissimilarities


def configuration_cost(metric: Metric, configuration: Configuration) -> float:
    """Total medoid-to-member dissimilarity over all clusters (lower is better)."""
    return sum(cluster_cost(metric, c) for c in configuration)


def cluster_costs(metric: Metric, configuration: Configuration) -> List[float]:
    """Per-cluster cost, in configuration order."""
    return [cluster_cost(metric, c) for c in configuration]


def labels(configuration: Configuration) -> List[int]:
    """Cluster index of every element, in ``configuration.elements`` order."""
    out = []
    for k, cluster in enumerate(configuration):
        out.extend([k] * cluster.size)
    return out


def silhouette_score(metric: Metric, configuration: Configuration) -> float:
    """Mean Silhouette Coefficient of a configuration.

    For each element, a is the mean dissimilarity to the rest of its
    cluster and b the smallest mean dissimilarity to another cluster; its
    coefficient is (b - a) / max(a, b). Elements of singleton clusters
    score 0.

    Args:
        metric: Pairwise dissimilarity function
        configuration: Clustered elements

    Returns:
        Mean silhouette coefficient in [-1, 1]
    """
    n_clusters = len(configuration)
    if n_clusters <= 1:
        return 0.0

    distances = pairwise_dissimilarities(configuration.elements, metric)
    label_t = torch.tensor(labels(configuration), dtype=torch.long)
    n_samples = label_t.shape[0]

    silhouette_values = torch.zeros(n_samples, dtype=distances.dtype)

    for i in range(n_samples):
        same_cluster = label_t == label_t[i]
        same_cluster[i] = False

        if same_cluster.sum() == 0:
            continue

        a = distances[i, same_cluster].mean()

        b_values = []
        for k in range(n_clusters):
            if k == label_t[i]:
                continue
            b_values.append(distances[i, label_t == k].mean())
        b = torch.stack(b_values).min()

        denom = torch.max(a, b)
        if denom > 0:
            silhouette_values[i] = (b - a) / denom

    return silhouette_values.mean().item()
