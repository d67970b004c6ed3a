# tests/test_medoid_update.py
"""
Medoid re-selection.

Covers:
- cluster_permutations yields n rotations, current arrangement first
- every candidate keeps the same multiset of elements
- update_cluster picks the cheapest candidate, keeping the medoid on ties
- update_configuration touches clusters independently
"""

from __future__ import annotations

from collections import Counter

from medoidsearch.base import Cluster, Configuration, cluster_cost, new_cluster
from medoidsearch.updates import (
    cluster_permutations, update_cluster, update_configuration
)


def test_permutations_are_rotations():
    cands = cluster_permutations(Cluster(3, (1, 5, 7)))
    assert cands == [
        Cluster(3, (1, 5, 7)),
        Cluster(1, (5, 7, 3)),
        Cluster(5, (7, 3, 1)),
        Cluster(7, (3, 1, 5)),
    ]


def test_permutations_of_lone_medoid():
    assert cluster_permutations(new_cluster(4)) == [new_cluster(4)]


def test_permutations_preserve_elements():
    c = Cluster(2, (2, 9, 4, 4))
    for cand in cluster_permutations(c):
        assert Counter(cand.elements) == Counter(c.elements)
        assert cand.size == c.size


def test_update_cluster_moves_medoid_to_centre(sq):
    c = Cluster(1, (2, 3, 4, 5))
    best = update_cluster(sq, c)
    assert best.medoid == 3
    assert sorted(best.members) == [1, 2, 4, 5]
    assert cluster_cost(sq, best) == 10


def test_update_cluster_keeps_medoid_on_tie(sq):
    # medoid 1 and candidate 2 both cost 1
    assert update_cluster(sq, Cluster(1, (2,))).medoid == 1
    assert update_cluster(sq, Cluster(2, (1,))).medoid == 2


def test_update_cluster_earliest_candidate_wins_among_ties(sq):
    # 2 and 3 both cost 6; the rotation reaches 2 first
    c = Cluster(1, (2, 3, 4))
    best = update_cluster(sq, c)
    costs = {cand.medoid: cluster_cost(sq, cand) for cand in cluster_permutations(c)}
    assert costs[2] == costs[3] == 6
    assert best.medoid == 2


def test_update_cluster_is_locally_optimal(sq):
    c = Cluster(9, (1, 4, 7, 2, 8))
    best = update_cluster(sq, c)
    best_cost = cluster_cost(sq, best)
    assert best_cost <= cluster_cost(sq, c)
    for cand in cluster_permutations(c):
        assert best_cost <= cluster_cost(sq, cand)


def test_update_configuration_is_per_cluster(sq):
    config = Configuration((Cluster(1, (2, 3)), Cluster(10, ()), Cluster(20, (21, 22))))
    out = update_configuration(sq, config)
    assert out.medoids == [2, 10, 21]
    assert out[1] == config[1]
    # input untouched
    assert config.medoids == [1, 10, 20]
