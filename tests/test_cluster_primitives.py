# tests/test_cluster_primitives.py
"""
Cluster and Configuration data model.

Covers:
- new_cluster / add_element build new values and never mutate
- distance_to and cluster_cost
- decluster / deconfigure ordering
"""

from __future__ import annotations

import dataclasses

import pytest

from medoidsearch.base import (
    Cluster, Configuration, new_cluster, add_element, distance_to,
    cluster_cost, decluster, deconfigure
)


def test_new_cluster_has_no_members():
    c = new_cluster(3)
    assert c.medoid == 3
    assert c.members == ()
    assert c.size == 1


def test_add_element_appends_and_leaves_original_untouched():
    c0 = new_cluster(3)
    c1 = add_element(1, c0)
    c2 = add_element(5, c1)
    assert c0.members == ()
    assert c1.members == (1,)
    assert c2.members == (1, 5)
    assert c2.medoid == 3
    assert c2.elements == (3, 1, 5)


def test_cluster_is_immutable():
    c = new_cluster(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.medoid = 2


def test_members_are_coerced_to_tuple():
    c = Cluster(0, [1, 2])
    assert c.members == (1, 2)


def test_distance_to_uses_medoid_first(sq):
    calls = []

    def metric(a, b):
        calls.append((a, b))
        return sq(a, b)

    c = Cluster(3, (100,))
    assert distance_to(metric, 7, c) == 16
    assert calls == [(3, 7)]


def test_cluster_cost_worked_example(sq):
    c = Cluster(3, (1, 5, 7, 9))
    assert cluster_cost(sq, c) == 60


def test_cluster_cost_of_lone_medoid_is_zero(sq):
    assert cluster_cost(sq, new_cluster(42)) == 0


def test_decluster_returns_members_and_bare_medoid():
    members, bare = decluster(Cluster(3, (1, 5)))
    assert members == [1, 5]
    assert bare == Cluster(3, ())


def test_deconfigure_concatenates_in_cluster_then_member_order():
    config = Configuration((Cluster(2, (1, 3)), Cluster(5, ()), Cluster(8, (9, 7))))
    elements, emptied = deconfigure(config)
    assert elements == [1, 3, 9, 7]
    assert emptied.medoids == [2, 5, 8]
    assert all(c.members == () for c in emptied)
    # input untouched
    assert config[0].members == (1, 3)


def test_configuration_views():
    config = Configuration.from_medoids([4, 1])
    config = Configuration((add_element(9, config[0]), config[1]))
    assert len(config) == 2
    assert config.n_clusters == 2
    assert config.medoids == [4, 1]
    assert config.elements == [4, 9, 1]
    assert config.n_elements == 3
    assert list(config) == [Cluster(4, (9,)), Cluster(1, ())]


def test_empty_configuration():
    config = Configuration()
    assert len(config) == 0
    assert config.elements == []
    assert config.medoids == []
