"""
Input validation utilities.

All checks raise ``InvalidArgumentError`` (a ``ValueError``) at the API
boundary so misuse never surfaces as an obscure failure deep inside the
assignment or update logic.
"""

from numbers import Integral
from typing import Any, List, Optional, Sequence, Union
import torch
from torch import Tensor
import numpy as np

from ..base.errors import InvalidArgumentError


def _is_int(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def check_n_clusters(n_clusters: int, n_samples: int) -> None:
    """Validate number of clusters.

    Args:
        n_clusters: Number of clusters
        n_samples: Number of elements

    Raises:
        InvalidArgumentError: If not an integer in [1, n_samples]
    """
    if not _is_int(n_clusters):
        raise InvalidArgumentError(f"n_clusters must be int, got {type(n_clusters)}")

    if n_clusters <= 0:
        raise InvalidArgumentError(f"n_clusters must be positive, got {n_clusters}")

    if n_clusters > n_samples:
        raise InvalidArgumentError(f"n_clusters ({n_clusters}) cannot be larger than "
                                   f"n_samples ({n_samples})")


def check_positive_int(value: int, name: str) -> int:
    """Validate a strictly positive integer parameter such as max_iter."""
    if not _is_int(value) or value < 1:
        raise InvalidArgumentError(f"{name} must be a positive int, got {value!r}")
    return int(value)


def check_metric(metric: Any) -> Any:
    """Ensure the metric is callable."""
    if not callable(metric):
        raise InvalidArgumentError(f"metric must be callable, got {type(metric)}")
    return metric


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> Optional[torch.Generator]:
    """Create generator from random state.

    Args:
        random_state: Seed or generator

    Returns:
        Generator or None
    """
    if random_state is None:
        return None
    elif _is_int(random_state):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    elif isinstance(random_state, torch.Generator):
        return random_state
    else:
        raise InvalidArgumentError(f"random_state must be int or Generator, got {type(random_state)}")


def check_elements(X: Union[Sequence[Any], Tensor, np.ndarray]) -> List[Any]:
    """Turn the input into a list of elements.

    Tensors and arrays are split along their first axis, so each row is
    one element. Any other iterable is taken element by element.
    """
    if isinstance(X, Tensor):
        if X.dim() == 0:
            raise InvalidArgumentError("Expected a sequence of elements, got a 0-d tensor")
        return list(X.unbind(0))
    if isinstance(X, np.ndarray):
        if X.ndim == 0:
            raise InvalidArgumentError("Expected a sequence of elements, got a 0-d array")
        return list(X)
    if isinstance(X, (str, bytes)):
        raise InvalidArgumentError("Expected a sequence of elements, got a string")
    try:
        return list(X)
    except TypeError:
        raise InvalidArgumentError(f"Expected a sequence of elements, got {type(X)}") from None


def check_medoid_indices(indices: Sequence[int], n_clusters: int,
                         n_samples: int) -> List[int]:
    """Validate medoid indices produced by an initialization strategy."""
    indices = list(indices)
    if len(indices) != n_clusters:
        raise InvalidArgumentError(f"Expected {n_clusters} medoid indices, "
                                   f"got {len(indices)}")
    for idx in indices:
        if not _is_int(idx) or not 0 <= idx < n_samples:
            raise InvalidArgumentError(f"Medoid index {idx!r} out of range "
                                       f"for {n_samples} elements")
    if len(set(indices)) != len(indices):
        raise InvalidArgumentError(f"Medoid indices must be distinct, got {indices}")
    return [int(i) for i in indices]
