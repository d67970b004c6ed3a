"""
First-k seeding.

The first ``n_clusters`` elements, in input order, become the initial
medoids. This is the reference behaviour of the engine.
"""

from typing import Any, List, Sequence

from ..base.interfaces import InitializationStrategy
from ..base.data_structures import Metric


class FirstKInit(InitializationStrategy):
    """Use the leading elements as medoids."""

    def initialize(self, elements: Sequence[Any], n_clusters: int,
                   metric: Metric = None) -> List[int]:
        return list(range(n_clusters))
