"""
Core data structures for the k-medoids engine.

A ``Cluster`` is a medoid plus its assigned members; a ``Configuration`` is
the ordered collection of clusters partitioning every input element. Both
are immutable: every operation below returns a new value instead of
mutating its argument, so configurations from different iterations never
alias each other.
"""

from typing import Any, Callable, Iterator, List, Sequence, Tuple, TypeVar
from dataclasses import dataclass, field

T = TypeVar('T')

Metric = Callable[[Any, Any], float]


@dataclass(frozen=True)
class Cluster:
    """A medoid and the ordered members assigned to it.

    The medoid is itself an input element and is never repeated in
    ``members``.
    """

    medoid: Any
    members: Tuple[Any, ...] = ()

    def __post_init__(self):
        if not isinstance(self.members, tuple):
            object.__setattr__(self, 'members', tuple(self.members))

    @property
    def elements(self) -> Tuple[Any, ...]:
        """Medoid followed by the members."""
        return (self.medoid,) + self.members

    @property
    def size(self) -> int:
        return 1 + len(self.members)


@dataclass(frozen=True)
class Configuration:
    """Ordered sequence of clusters partitioning all elements."""

    clusters: Tuple[Cluster, ...] = ()

    def __post_init__(self):
        if not isinstance(self.clusters, tuple):
            object.__setattr__(self, 'clusters', tuple(self.clusters))

    @classmethod
    def from_medoids(cls, medoids: Sequence[Any]) -> 'Configuration':
        """Configuration of empty clusters over ``medoids``, in order."""
        return cls(tuple(new_cluster(m) for m in medoids))

    def __len__(self) -> int:
        return len(self.clusters)

    def __iter__(self) -> Iterator[Cluster]:
        return iter(self.clusters)

    def __getitem__(self, idx: int) -> Cluster:
        return self.clusters[idx]

    @property
    def n_clusters(self) -> int:
        return len(self.clusters)

    @property
    def medoids(self) -> List[Any]:
        return [c.medoid for c in self.clusters]

    @property
    def elements(self) -> List[Any]:
        """Every element, cluster by cluster, medoid first."""
        out = []
        for c in self.clusters:
            out.extend(c.elements)
        return out

    @property
    def n_elements(self) -> int:
        return sum(c.size for c in self.clusters)


@dataclass
class SearchState:
    """Snapshot of one evaluated local-search step.

    Used for convergence bookkeeping and debugging. ``metadata`` carries
    per-step timing (``iter_time``) for every step after the start.
    """
    iteration: int
    configuration: Configuration
    objective_value: float
    improved: bool = False
    converged: bool = False
    metadata: dict = field(default_factory=dict)


def new_cluster(medoid: T) -> Cluster:
    """Cluster over ``medoid`` with no members."""
    return Cluster(medoid, ())


def add_element(element: T, cluster: Cluster) -> Cluster:
    """New cluster with the same medoid and ``element`` appended."""
    return Cluster(cluster.medoid, cluster.members + (element,))


def distance_to(metric: Metric, element: T, cluster: Cluster) -> float:
    """Dissimilarity between the cluster's medoid and ``element``."""
    return metric(cluster.medoid, element)


def cluster_cost(metric: Metric, cluster: Cluster) -> float:
    """Sum of medoid-to-member dissimilarities."""
    return sum(metric(cluster.medoid, m) for m in cluster.members)


def decluster(cluster: Cluster) -> Tuple[List[Any], Cluster]:
    """Strip a cluster down to its medoid.

    Returns:
        (members, medoid-only cluster)
    """
    return list(cluster.members), new_cluster(cluster.medoid)


def deconfigure(configuration: Configuration) -> Tuple[List[Any], Configuration]:
    """Decluster every cluster of a configuration.

    Returns:
        (all members concatenated in cluster then member order,
         configuration of medoid-only clusters in the original order)
    """
    elements = []
    emptied = []
    for cluster in configuration:
        members, bare = decluster(cluster)
        elements.extend(members)
        emptied.append(bare)
    return elements, Configuration(tuple(emptied))
