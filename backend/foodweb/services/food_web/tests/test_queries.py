"""测试食物网结构查询"""

import numpy as np

from ..matrix import build_adjacency, indices_at_max, predator_counts
from ..queries import (
    apex_predators,
    list_relations,
    most_flexible_eaters,
    producers,
    tastiest_food,
)
from ..store import build_store


class TestAdjacency:
    """邻接矩阵"""

    def test_counts_duplicate_edges(self):
        store = build_store(["Grass", "Goat"])
        store.add_predation(1, 0)
        store.add_predation(1, 0)

        matrix = build_adjacency(store)

        assert matrix.shape == (2, 2)
        assert matrix[1, 0] == 2
        assert matrix.sum() == 2

    def test_empty(self, empty_store):
        assert build_adjacency(empty_store).shape == (0, 0)
        assert indices_at_max(np.array([], dtype=np.int64)) == []

    def test_predator_counts_ignore_self_and_duplicates(self):
        store = build_store(["Grass", "Cannibal"])
        store.add_predation(1, 1)
        store.add_predation(1, 0)
        store.add_predation(1, 0)

        counts = predator_counts(build_adjacency(store))

        assert counts.tolist() == [1, 0]


class TestListRelations:
    def test_prey_names_in_edge_order(self, meadow):
        relations = list_relations(meadow)

        assert [r.name for r in relations] == meadow.names()
        assert relations[5].prey_names == ["Snake", "Mouse", "Rabbit"]
        assert relations[0].prey_names == []
        assert relations[0].is_producer

    def test_duplicate_edges_listed_each_time(self):
        store = build_store(["Grass", "Goat"])
        store.add_predation(1, 0)
        store.add_predation(1, 0)

        assert list_relations(store)[1].prey_names == ["Grass", "Grass"]

    def test_every_added_edge_is_listed(self, meadow):
        for pred, relation in enumerate(list_relations(meadow)):
            for prey in meadow.prey_of(pred):
                assert meadow.name_of(prey) in relation.prey_names


class TestApexPredators:
    def test_chain(self, grass_chain):
        assert apex_predators(grass_chain) == ["Fox"]

    def test_meadow(self, meadow):
        assert apex_predators(meadow) == ["Hawk", "Bear"]

    def test_isolated_organism_is_apex(self):
        store = build_store(["Rock", "Grass", "Goat"])
        store.add_predation(2, 1)

        assert apex_predators(store) == ["Rock", "Goat"]

    def test_self_predation_is_not_apex(self):
        store = build_store(["Cannibal"])
        store.add_predation(0, 0)

        assert apex_predators(store) == []

    def test_apex_never_appears_as_prey(self, meadow):
        apex = set(apex_predators(meadow))
        eaten = {meadow.name_of(v) for prey in meadow.prey_lists() for v in prey}

        assert apex.isdisjoint(eaten)
        assert apex | eaten == set(meadow.names())

    def test_empty(self, empty_store):
        assert apex_predators(empty_store) == []


class TestProducers:
    def test_chain(self, grass_chain):
        assert producers(grass_chain) == ["Grass"]

    def test_meadow(self, meadow):
        assert producers(meadow) == ["Grass", "Clover"]

    def test_becomes_producer_after_extinction(self, grass_chain):
        grass_chain.remove_organism(0)

        assert producers(grass_chain) == ["Rabbit"]

    def test_empty(self, empty_store):
        assert producers(empty_store) == []


class TestMostFlexibleEaters:
    def test_single_winner(self, meadow):
        assert most_flexible_eaters(meadow) == ["Hawk"]

    def test_ties_all_included(self):
        store = build_store(["Grass", "Clover", "Goat", "Sheep"])
        for pred in (2, 3):
            store.add_predation(pred, 0)
            store.add_predation(pred, 1)

        assert most_flexible_eaters(store) == ["Goat", "Sheep"]

    def test_duplicates_count(self):
        store = build_store(["Grass", "Clover", "Goat", "Sheep"])
        store.add_predation(2, 0)
        store.add_predation(2, 0)
        store.add_predation(3, 1)

        assert most_flexible_eaters(store) == ["Goat"]

    def test_no_edges_selects_everyone(self):
        store = build_store(["Grass", "Moss"])

        assert most_flexible_eaters(store) == ["Grass", "Moss"]

    def test_empty(self, empty_store):
        assert most_flexible_eaters(empty_store) == []


class TestTastiestFood:
    def test_chain_ties(self, grass_chain):
        """Grass 与 Rabbit 各被 1 个捕食者捕食"""
        assert tastiest_food(grass_chain) == ["Grass", "Rabbit"]

    def test_meadow_ties(self, meadow):
        assert tastiest_food(meadow) == ["Grass", "Clover", "Rabbit", "Mouse"]

    def test_distinct_predators_only(self):
        store = build_store(["Grass", "Clover", "Goat", "Sheep"])
        store.add_predation(2, 0)
        store.add_predation(2, 0)
        store.add_predation(2, 0)
        store.add_predation(2, 1)
        store.add_predation(3, 1)

        assert tastiest_food(store) == ["Clover"]

    def test_self_predation_not_counted(self):
        store = build_store(["Grass", "Cannibal"])
        store.add_predation(1, 1)
        store.add_predation(1, 0)

        assert tastiest_food(store) == ["Grass"]

    def test_no_edges_selects_everyone(self):
        store = build_store(["Grass", "Moss"])

        assert tastiest_food(store) == ["Grass", "Moss"]

    def test_empty(self, empty_store):
        assert tastiest_food(empty_store) == []

    def test_queries_do_not_mutate(self, meadow):
        before = meadow.snapshot()

        list_relations(meadow)
        apex_predators(meadow)
        producers(meadow)
        most_flexible_eaters(meadow)
        tastiest_food(meadow)

        assert meadow.snapshot() == before
