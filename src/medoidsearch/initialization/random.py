"""
Random seeding strategy.

Selects random elements from the input as initial medoids.
"""

from typing import Any, List, Optional, Sequence, Union
import torch

from ..base.interfaces import InitializationStrategy
from ..base.data_structures import Metric
from ..utils.validation import check_random_state


class RandomInit(InitializationStrategy):
    """Random initialization by selecting elements from the input.

    Selects n_clusters distinct elements uniformly at random.
    """

    def __init__(self, random_state: Optional[Union[int, torch.Generator]] = None):
        """
        Args:
            random_state: Seed or generator for reproducibility
        """
        self.random_state = random_state

    def initialize(self, elements: Sequence[Any], n_clusters: int,
                   metric: Metric = None) -> List[int]:
        """Pick medoid indices with ``torch.randperm``.

        Args:
            elements: Input elements
            n_clusters: Number of medoids
            metric: Unused

        Returns:
            List of distinct indices
        """
        generator = check_random_state(self.random_state)
        return torch.randperm(len(elements), generator=generator)[:n_clusters].tolist()
