"""
K-medoids estimator.

Wraps the functional search in an estimator with ``fit``/``predict`` and
fitted attributes. The search runs over element indices, so every input
position gets a label even when elements are unhashable or repeated.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Union
import torch
from torch import Tensor

from ..base.data_structures import Cluster, Configuration
from ..base.errors import InvalidArgumentError
from ..base.interfaces import InitializationStrategy
from ..assignments.nearest import nearest_cluster_index
from ..distances.precomputed import PrecomputedMetric
from ..distances.registry import get_metric
from ..initialization import FirstKInit, RandomInit, KMedoidsPlusPlusInit
from ..utils.convergence import NoImprovement
from ..utils.metrics import cluster_costs, configuration_cost
from ..utils.validation import (
    check_elements, check_medoid_indices, check_n_clusters, check_positive_int
)
from .search import run_local_search, seed_configuration


class KMedoids:
    """K-medoids clustering by greedy local search.

    Partitions elements into K clusters, each represented by one of its own
    members, minimizing the total medoid-to-member dissimilarity. Only a
    pairwise metric is needed; elements may be of any type.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    metric : str or callable, default='sqeuclidean'
        Dissimilarity function ``metric(medoid, element) -> float`` or one
        of 'sqeuclidean', 'euclidean', 'manhattan', 'cosine', 'absolute'
    init : str or InitializationStrategy, default='first'
        Medoid seeding:
        - 'first' : the first n_clusters elements
        - 'random' : random distinct elements
        - 'k-medoids++' : k-medoids++ sampling
        - an InitializationStrategy instance
    max_iter : int, default=100
        Maximum number of local search iterations
    patience : int, default=1
        Consecutive non-improving iterations tolerated; 1 stops at the first
        one
    precompute : bool, default=False
        Evaluate all pairwise dissimilarities once before searching
    verbose : int, default=0
        Verbosity level
    random_state : int, optional
        Random seed for the 'random' and 'k-medoids++' seedings

    Attributes
    ----------
    configuration_ : Configuration
        Final clusters over the original elements
    medoid_indices_ : list of int
        Input positions of the medoids, in cluster order
    medoids_ : list
        The medoid elements
    labels_ : Tensor of shape (n_samples,)
        Cluster index of every input element
    cluster_costs_ : list of float
        Cost of each cluster
    inertia_ : float
        Total configuration cost
    n_iter_ : int
        Number of iterations evaluated
    history_ : list of SearchState
        Every evaluated configuration (over element indices)
    """

    def __init__(self,
                 n_clusters: int,
                 metric: Union[str, Callable[[Any, Any], float]] = 'sqeuclidean',
                 init: Union[str, InitializationStrategy] = 'first',
                 max_iter: int = 100,
                 patience: int = 1,
                 precompute: bool = False,
                 verbose: int = 0,
                 random_state: Optional[int] = None):
        self.n_clusters = n_clusters
        self.metric = metric
        self.init = init
        self.max_iter = max_iter
        self.patience = patience
        self.precompute = precompute
        self.verbose = verbose
        self.random_state = random_state

        self.fitted_ = False
        self.n_iter_ = 0
        self.history_ = []
        self.labels_ = None

    def _create_components(self) -> None:
        """Resolve metric, seeding and stopping rule from the parameters."""
        self.metric_ = get_metric(self.metric)

        if isinstance(self.init, InitializationStrategy):
            self.initialization_strategy = self.init
        elif self.init == 'first':
            self.initialization_strategy = FirstKInit()
        elif self.init == 'random':
            self.initialization_strategy = RandomInit(self.random_state)
        elif self.init == 'k-medoids++':
            self.initialization_strategy = KMedoidsPlusPlusInit(self.random_state)
        else:
            raise InvalidArgumentError(f"Unknown init method: {self.init!r}")

        check_positive_int(self.max_iter, 'max_iter')
        self.convergence_criterion = NoImprovement(patience=self.patience)

    def _index_metric(self, elements: List[Any]) -> Callable[[int, int], float]:
        if self.precompute:
            return PrecomputedMetric.from_elements(elements, self.metric_)

        metric = self.metric_

        def index_metric(i: int, j: int) -> float:
            return metric(elements[i], elements[j])

        return index_metric

    def fit(self, X: Union[Sequence[Any], Tensor], y: Optional[Any] = None) -> 'KMedoids':
        """Fit k-medoids clustering.

        Parameters
        ----------
        X : sequence of elements, array or Tensor
            Elements to cluster; arrays and tensors are split by row
        y : Ignored
            Not used, present for API consistency

        Returns
        -------
        self : KMedoids
            Fitted estimator
        """
        elements = check_elements(X)
        n_samples = len(elements)
        self._create_components()

        if n_samples == 0:
            self._store(elements, Configuration(), [], lambda i, j: 0.0)
            return self

        check_n_clusters(self.n_clusters, n_samples)

        if self.verbose:
            print(f"Initializing {self.n_clusters} medoids...")

        index_metric = self._index_metric(elements)
        indices = list(range(n_samples))
        medoid_indices = check_medoid_indices(
            self.initialization_strategy.initialize(indices, self.n_clusters, index_metric),
            self.n_clusters, n_samples
        )

        initial = seed_configuration(index_metric, indices, medoid_indices)
        result, history = run_local_search(
            index_metric, initial,
            max_iter=self.max_iter,
            criterion=self.convergence_criterion,
            verbose=self.verbose
        )

        self._store(elements, result, history, index_metric)
        return self

    def _store(self, elements: List[Any], index_configuration: Configuration,
               history: list, index_metric: Callable[[int, int], float]) -> None:
        """Translate an index configuration back to elements and record it."""
        self.configuration_ = Configuration(tuple(
            Cluster(elements[c.medoid], tuple(elements[m] for m in c.members))
            for c in index_configuration
        ))

        labels = torch.empty(len(elements), dtype=torch.long)
        for k, cluster in enumerate(index_configuration):
            labels[list(cluster.elements)] = k

        self.labels_ = labels
        self.medoid_indices_ = index_configuration.medoids
        self.medoids_ = [elements[i] for i in self.medoid_indices_]
        self.cluster_costs_ = cluster_costs(index_metric, index_configuration)
        self.inertia_ = configuration_cost(index_metric, index_configuration)
        self.history_ = history
        self.n_iter_ = history[-1].iteration if history else 0
        self.fitted_ = True

    def fit_predict(self, X: Union[Sequence[Any], Tensor], y: Optional[Any] = None) -> Tensor:
        """Fit and return labels."""
        self.fit(X, y)
        return self.labels_

    def predict(self, X: Union[Sequence[Any], Tensor]) -> Tensor:
        """Predict cluster labels for new elements.

        Each element goes to the nearest fitted medoid; ties go to the
        lowest cluster index.

        Parameters
        ----------
        X : sequence of elements, array or Tensor
            New elements

        Returns
        -------
        labels : Tensor of shape (n_samples,)
            Cluster labels
        """
        if not self.fitted_:
            raise RuntimeError("Model must be fitted before calling predict")

        elements = check_elements(X)
        medoids = Configuration.from_medoids(self.medoids_)
        return torch.tensor(
            [nearest_cluster_index(self.metric_, e, medoids) for e in elements],
            dtype=torch.long
        )

    def score(self, X: Union[Sequence[Any], Tensor], y: Optional[Any] = None) -> float:
        """Negative total dissimilarity of X to its nearest medoids."""
        labels = self.predict(X)
        elements = check_elements(X)
        total = 0.0
        for element, k in zip(elements, labels.tolist()):
            total += self.metric_(self.medoids_[k], element)
        return -total

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'metric': self.metric,
            'init': self.init,
            'max_iter': self.max_iter,
            'patience': self.patience,
            'precompute': self.precompute,
            'verbose': self.verbose,
            'random_state': self.random_state
        }

    def set_params(self, **params) -> 'KMedoids':
        """Set parameters (sklearn compatibility)."""
        valid = self.get_params()
        for key, value in params.items():
            if key not in valid:
                raise InvalidArgumentError(f"Invalid parameter {key!r} for KMedoids")
            setattr(self, key, value)
        return self
