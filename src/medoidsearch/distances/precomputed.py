"""
Precomputed dissimilarity matrices.

Evaluating an expensive metric once per pair up front lets the search run
over element indices with constant-time lookups.
"""

from typing import Any, Callable, Sequence, Union
import numpy as np
import torch
from torch import Tensor

from ..base.errors import InvalidArgumentError


def pairwise_dissimilarities(elements: Sequence[Any],
                             metric: Callable[[Any, Any], float],
                             dtype: torch.dtype = torch.float64) -> Tensor:
    """Evaluate ``metric`` on every ordered pair of elements.

    Args:
        elements: n elements
        metric: Pairwise dissimilarity function
        dtype: Result dtype

    Returns:
        (n, n) tensor with entry [i, j] = metric(elements[i], elements[j])
    """
    n = len(elements)
    rows = [[metric(elements[i], elements[j]) for j in range(n)] for i in range(n)]
    if n == 0:
        return torch.zeros((0, 0), dtype=dtype)
    return torch.tensor(rows, dtype=dtype)


class PrecomputedMetric:
    """Metric over integer indices backed by a square dissimilarity matrix.

    Entry [i, j] is returned as-is, so asymmetric matrices are honoured.
    """

    def __init__(self, matrix: Union[Tensor, np.ndarray, Sequence[Sequence[float]]]):
        """
        Args:
            matrix: (n, n) dissimilarities
        """
        matrix = torch.as_tensor(matrix, dtype=torch.float64)
        if matrix.dim() != 2 or matrix.shape[0] != matrix.shape[1]:
            raise InvalidArgumentError(f"Expected a square matrix, got shape {tuple(matrix.shape)}")
        self.matrix = matrix
        self._rows = matrix.tolist()

    @classmethod
    def from_elements(cls, elements: Sequence[Any],
                      metric: Callable[[Any, Any], float]) -> 'PrecomputedMetric':
        """Build the matrix by evaluating ``metric`` over ``elements``."""
        return cls(pairwise_dissimilarities(elements, metric))

    @property
    def n_elements(self) -> int:
        return self.matrix.shape[0]

    def __call__(self, i: int, j: int) -> float:
        return self._rows[i][j]
