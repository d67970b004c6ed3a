"""Lookup of metrics by name."""

from typing import Any, Callable, Union

from ..base.errors import InvalidArgumentError
from .euclidean import (
    squared_euclidean, euclidean, manhattan, cosine_distance, absolute_difference
)

METRICS = {
    'sqeuclidean': squared_euclidean,
    'euclidean': euclidean,
    'manhattan': manhattan,
    'cosine': cosine_distance,
    'absolute': absolute_difference,
}


def get_metric(metric: Union[str, Callable[[Any, Any], float]]) -> Callable[[Any, Any], float]:
    """Resolve a metric name to its function; callables pass through."""
    if callable(metric):
        return metric
    if isinstance(metric, str):
        try:
            return METRICS[metric]
        except KeyError:
            raise InvalidArgumentError(f"Unknown metric: {metric!r}. "
                                       f"Expected one of {sorted(METRICS)}") from None
    raise InvalidArgumentError(f"metric must be a name or a callable, got {type(metric)}")
