"""
Ready-made metrics for vector-valued elements.

The engine itself never assumes a vector space; these are conveniences
for the common case where elements are points. Each accepts torch tensors,
numpy arrays or plain number sequences and returns a Python float.
"""

from typing import Any
import torch
from torch import Tensor


def _as_tensor(x: Any) -> Tensor:
    return torch.as_tensor(x, dtype=torch.float64)


def squared_euclidean(x: Any, y: Any) -> float:
    """Squared Euclidean distance ||x - y||²."""
    diff = _as_tensor(x) - _as_tensor(y)
    return torch.sum(diff * diff).item()


def euclidean(x: Any, y: Any) -> float:
    """Euclidean distance ||x - y||."""
    return torch.linalg.vector_norm(_as_tensor(x) - _as_tensor(y)).item()


def manhattan(x: Any, y: Any) -> float:
    """L1 distance sum |x_i - y_i|."""
    return torch.sum(torch.abs(_as_tensor(x) - _as_tensor(y))).item()


def cosine_distance(x: Any, y: Any) -> float:
    """One minus the cosine similarity of x and y."""
    u = _as_tensor(x).flatten()
    v = _as_tensor(y).flatten()
    denom = torch.norm(u).clamp(min=1e-8) * torch.norm(v).clamp(min=1e-8)
    return (1.0 - torch.dot(u, v) / denom).item()


def absolute_difference(x: Any, y: Any) -> float:
    """|x - y| for scalar elements."""
    return abs(x - y)
