# tests/utils.py
"""
Small, reusable helpers used across the medoidsearch test suite.

Functions:
- multiset(xs): Counter over hashable elements.
- assert_partition(config, elements): every input element appears exactly once.
- cluster_sets(config): {medoid: sorted members} view, independent of cluster order.
- brute_force_single_medoid(elements, metric): cheapest medoid for k=1 and its cost.
- time_block(label, meta=None): context manager that prints wall-clock time.
"""

from __future__ import annotations

import json
import time
from collections import Counter
from contextlib import contextmanager
from typing import Any, Callable, Dict, Sequence, Tuple


def multiset(xs) -> Counter:
    return Counter(xs)


def assert_partition(config, elements: Sequence[Any]) -> None:
    """Union of medoids and members equals the input multiset exactly once."""
    got = multiset(config.elements)
    want = multiset(elements)
    assert got == want, f"partition broken: got {got}, want {want}"


def cluster_sets(config) -> Dict[Any, list]:
    return {c.medoid: sorted(c.members) for c in config}


def brute_force_single_medoid(
    elements: Sequence[Any], metric: Callable[[Any, Any], float]
) -> Tuple[Any, float]:
    """Return (medoid, cost) minimizing the total dissimilarity to all others."""
    best = None
    best_cost = float("inf")
    for i, m in enumerate(elements):
        c = sum(metric(m, e) for j, e in enumerate(elements) if j != i)
        if c < best_cost:
            best, best_cost = m, c
    return best, best_cost


@contextmanager
def time_block(label: str, meta: Dict[str, Any] | None = None):
    """
    Context manager to time a block and print a single-line summary.

    Output
    ------
    [timing] fit {"n":400,"k":3} 0.123s
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        meta_str = ""
        if meta:
            meta_str = " " + json.dumps(meta, separators=(",", ":"), sort_keys=True)
        print(f"[timing] {label}{meta_str} {elapsed:.3f}s")
