"""
The k-medoids iteration and the local search driving it.

One iteration strips every cluster to its medoid, reassigns all other
elements to their nearest medoid and re-selects each cluster's medoid.
The local search repeats this while the configuration cost strictly
decreases and returns the last configuration before the first step that
fails to improve it.
"""

from typing import Any, Iterable, List, Optional, Sequence, Tuple
import time
import warnings

from ..base.data_structures import Configuration, Metric, SearchState, deconfigure
from ..base.interfaces import ConvergenceCriterion, InitializationStrategy
from ..assignments.nearest import assign_elements
from ..updates.medoid import update_configuration
from ..initialization.first_k import FirstKInit
from ..utils.convergence import NoImprovement
from ..utils.metrics import configuration_cost
from ..utils.validation import (
    check_elements, check_medoid_indices, check_metric, check_n_clusters,
    check_positive_int
)


def kmedoids_iteration(metric: Metric, configuration: Configuration) -> Configuration:
    """Decluster, reassign and re-optimize once."""
    elements, emptied = deconfigure(configuration)
    reassigned = assign_elements(metric, elements, emptied)
    return update_configuration(metric, reassigned)


def run_local_search(metric: Metric,
                     configuration: Configuration,
                     max_iter: int = 100,
                     criterion: Optional[ConvergenceCriterion] = None,
                     verbose: int = 0) -> Tuple[Configuration, List[SearchState]]:
    """Iterate from ``configuration`` until the criterion stops the search.

    Args:
        metric: Pairwise dissimilarity function
        configuration: Starting configuration
        max_iter: Maximum number of iterations to evaluate
        criterion: Stopping rule; defaults to ``NoImprovement(patience=1)``,
            which halts at the first step that does not strictly lower cost
        verbose: Verbosity level (0=silent, 1=progress, 2=detailed)

    Returns:
        (lowest-cost configuration seen, earliest on ties,
         one SearchState per evaluated configuration including the start)
    """
    max_iter = check_positive_int(max_iter, 'max_iter')
    if criterion is None:
        criterion = NoImprovement()
    criterion.reset()

    start_time = time.time()
    current = configuration
    current_cost = configuration_cost(metric, current)
    best, best_cost = current, current_cost

    criterion.check({'iteration': 0, 'objective': current_cost})
    history = [SearchState(iteration=0, configuration=current, objective_value=current_cost)]

    if verbose:
        print(f"Initial cost = {current_cost:.6f}")

    for iteration in range(1, max_iter + 1):
        iter_start_time = time.time()

        # Reassign and update medoids
        candidate = kmedoids_iteration(metric, current)
        candidate_cost = configuration_cost(metric, candidate)

        # Track best
        improved = candidate_cost < best_cost
        if improved:
            best, best_cost = candidate, candidate_cost

        # Check convergence
        converged = criterion.check({
            'iteration': iteration,
            'objective': candidate_cost,
            'configuration': candidate
        })
        iter_time = time.time() - iter_start_time

        # Store state
        history.append(SearchState(
            iteration=iteration,
            configuration=candidate,
            objective_value=candidate_cost,
            improved=improved,
            converged=converged,
            metadata={'iter_time': iter_time}
        ))

        # Logging
        if verbose >= 2 or (verbose >= 1 and iteration % 10 == 0):
            marker = "↓" if improved else "-"
            print(f"Iteration {iteration:3d}: cost = {candidate_cost:.6f} "
                  f"{marker} ({iter_time:.3f}s)")

        if converged:
            if verbose:
                print(f"Converged at iteration {iteration}")
            break

        current = candidate
    else:
        warnings.warn(f"Local search did not converge after {max_iter} iterations")

    if verbose:
        print(f"Final cost = {best_cost:.6f}, total search time: {time.time() - start_time:.3f}s")

    return best, history


def local_search(metric: Metric,
                 configuration: Configuration,
                 max_iter: int = 100,
                 criterion: Optional[ConvergenceCriterion] = None,
                 verbose: int = 0) -> Configuration:
    """Greedy hill-climbing over ``kmedoids_iteration``.

    See ``run_local_search`` for the arguments; only the resulting
    configuration is returned.
    """
    result, _ = run_local_search(metric, configuration, max_iter=max_iter,
                                 criterion=criterion, verbose=verbose)
    return result


def seed_configuration(metric: Metric, elements: Sequence[Any],
                       medoid_indices: Iterable[int]) -> Configuration:
    """Initial configuration: empty clusters over the chosen medoids, then
    every other element assigned in input order."""
    medoid_indices = list(medoid_indices)
    chosen = set(medoid_indices)
    medoids = [elements[i] for i in medoid_indices]
    rest = [e for i, e in enumerate(elements) if i not in chosen]
    return assign_elements(metric, rest, Configuration.from_medoids(medoids))


def kmedoids(k: int,
             metric: Metric,
             elements: Iterable[Any],
             init: Optional[InitializationStrategy] = None,
             max_iter: int = 100,
             criterion: Optional[ConvergenceCriterion] = None,
             verbose: int = 0) -> Configuration:
    """Partition ``elements`` into ``k`` clusters around actual elements.

    Args:
        k: Number of clusters, 0 < k <= len(elements)
        metric: Pairwise dissimilarity function
        elements: Elements to cluster; tensors and arrays are split by row
        init: Medoid seeding strategy; defaults to the first k elements
        max_iter: Maximum number of local search iterations
        criterion: Stopping rule for the local search
        verbose: Verbosity level

    Returns:
        Converged configuration; empty if ``elements`` is empty, whatever k

    Raises:
        InvalidArgumentError: If k is out of range or metric is not callable
    """
    elements = check_elements(elements)
    if not elements:
        return Configuration()

    check_metric(metric)
    check_n_clusters(k, len(elements))

    if init is None:
        init = FirstKInit()
    medoid_indices = check_medoid_indices(
        init.initialize(elements, k, metric), k, len(elements)
    )

    initial = seed_configuration(metric, elements, medoid_indices)
    return local_search(metric, initial, max_iter=max_iter,
                        criterion=criterion, verbose=verbose)
