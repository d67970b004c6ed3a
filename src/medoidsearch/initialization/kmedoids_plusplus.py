"""
k-medoids++ seeding strategy.

The k-means++ sampling rule expressed purely in terms of the metric: medoids
are chosen far apart so the local search starts closer to a good optimum.
"""

from typing import Any, List, Optional, Sequence, Union
import torch

from ..base.interfaces import InitializationStrategy
from ..base.data_structures import Metric
from ..utils.validation import check_random_state


class KMedoidsPlusPlusInit(InitializationStrategy):
    """k-medoids++ initialization.

    Algorithm:
    1. Choose the first medoid uniformly at random
    2. For each remaining medoid:
       - Compute each element's dissimilarity to its nearest chosen medoid
       - Sample the next medoid with probability proportional to it
    """

    def __init__(self, random_state: Optional[Union[int, torch.Generator]] = None):
        """
        Args:
            random_state: Seed or generator for reproducibility
        """
        self.random_state = random_state

    def _distances_from(self, metric: Metric, medoid: Any,
                        elements: Sequence[Any]) -> torch.Tensor:
        return torch.tensor([metric(medoid, e) for e in elements], dtype=torch.float64)

    def initialize(self, elements: Sequence[Any], n_clusters: int,
                   metric: Metric = None) -> List[int]:
        """Choose medoid indices with k-medoids++ sampling.

        Args:
            elements: Input elements
            n_clusters: Number of medoids
            metric: Pairwise dissimilarity function

        Returns:
            List of distinct indices, in selection order
        """
        n_points = len(elements)
        generator = check_random_state(self.random_state)

        first_idx = torch.randint(n_points, (1,), generator=generator).item()
        chosen = [first_idx]
        distances = self._distances_from(metric, elements[first_idx], elements)

        for _ in range(1, n_clusters):
            weights = distances.clamp(min=0.0)
            weights[chosen] = 0.0

            if weights.sum() > 0:
                idx = torch.multinomial(weights, 1, generator=generator).item()
            else:
                # Every remaining element coincides with a medoid
                idx = next(i for i in range(n_points) if i not in chosen)

            chosen.append(idx)
            distances = torch.minimum(
                distances, self._distances_from(metric, elements[idx], elements)
            )

        return chosen
