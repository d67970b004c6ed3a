"""
Convergence criteria for the k-medoids local search.

The default criterion is pure greedy hill-climbing: the search stops at the
first iteration that fails to strictly lower the configuration cost. A
patience window is offered as an explicit extension.
"""

from typing import Dict, Any

from ..base.interfaces import ConvergenceCriterion
from .validation import check_positive_int


class NoImprovement(ConvergenceCriterion):
    """Stop after ``patience`` consecutive steps without a strict improvement.

    An improvement means an objective strictly lower than the best one seen
    so far. With ``patience=1`` a single non-improving step halts the
    search, even if a later iteration would have improved further.
    """

    def __init__(self, patience: int = 1):
        """
        Args:
            patience: Number of consecutive non-improving steps tolerated
                before stopping
        """
        super().__init__()
        self.patience = check_positive_int(patience, 'patience')
        self._best_objective = None
        self._stale_count = 0

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Record the new objective and report whether to stop."""
        current_objective = current_state['objective']

        if self._best_objective is None:
            self._best_objective = current_objective
            return False

        improved = current_objective < self._best_objective
        if improved:
            self._best_objective = current_objective
            self._stale_count = 0
        else:
            self._stale_count += 1

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'objective': current_objective,
            'improved': improved,
            'stale_count': self._stale_count
        })

        return self._stale_count >= self.patience

    def reset(self):
        super().reset()
        self._best_objective = None
        self._stale_count = 0
