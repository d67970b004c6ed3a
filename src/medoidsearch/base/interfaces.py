"""
Core interfaces for the k-medoids engine.

The search itself is a fixed pipeline of pure functions; the pluggable
parts are how the initial medoids are seeded and when the local search
stops. Both are described by the abstract base classes below.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence

from .data_structures import Metric


class InitializationStrategy(ABC):
    """Abstract base class for medoid seeding strategies."""

    @abstractmethod
    def initialize(self, elements: Sequence[Any], n_clusters: int,
                   metric: Metric) -> List[int]:
        """Choose the initial medoids.

        Args:
            elements: Input elements
            n_clusters: Number of medoids to choose
            metric: Pairwise dissimilarity function

        Returns:
            List of ``n_clusters`` distinct indices into ``elements``,
            in medoid order
        """
        pass


class ConvergenceCriterion(ABC):
    """Abstract base class for stopping the local search."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check whether the search should stop.

        Args:
            current_state: Dictionary with at least 'iteration' and
                'objective' for the step just evaluated

        Returns:
            True if the search must stop, False to keep iterating
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []
