"""
Tests for playoff qualification and pooling.
"""

import pytest

from pgc_standings.engine.models import PlayoffSpotConfig, QualificationTier, StandingsEntry
from pgc_standings.engine.qualifier import pool_across_tours, qualify, qualify_tour, total_spots

GOLD = QualificationTier.POOL_A
SILVER = QualificationTier.POOL_B
NONE = QualificationTier.NONE


def tiers(entries):
    return {e.competitor_id: e.qualification_tier for e in entries}


def ids(entries):
    return [e.competitor_id for e in entries]


class TestQualifyTour:
    """Tests for qualify_tour function."""

    def test_two_gold_three_silver(self):
        entries = [
            StandingsEntry("p3", "pga", 80),
            StandingsEntry("p1", "pga", 100),
            StandingsEntry("p6", "pga", 50),
            StandingsEntry("p2", "pga", 90),
            StandingsEntry("p5", "pga", 60),
            StandingsEntry("p4", "pga", 70),
        ]
        result = qualify_tour(entries, [2, 3])
        assert ids(result) == ["p1", "p2", "p3", "p4", "p5", "p6"]
        assert [e.qualification_tier for e in result] == [GOLD, GOLD, SILVER, SILVER, SILVER, NONE]

    def test_positional_cutline_under_ties(self):
        entries = [
            StandingsEntry("a", "pga", 100),
            StandingsEntry("b", "pga", 90),
            StandingsEntry("c", "pga", 90),
            StandingsEntry("d", "pga", 80),
        ]
        result = tiers(qualify_tour(entries, PlayoffSpotConfig(2, 1)))
        assert result == {"a": GOLD, "b": GOLD, "c": SILVER, "d": NONE}

    def test_tie_inclusive_cutline(self):
        entries = [
            StandingsEntry("a", "pga", 100),
            StandingsEntry("b", "pga", 90),
            StandingsEntry("c", "pga", 90),
            StandingsEntry("d", "pga", 80),
            StandingsEntry("e", "pga", 80),
        ]
        result = tiers(qualify_tour(entries, PlayoffSpotConfig(2, 2), include_ties=True))
        assert result == {"a": GOLD, "b": GOLD, "c": GOLD, "d": SILVER, "e": SILVER}

    def test_tie_inclusive_silver_cutline(self):
        entries = [
            StandingsEntry("a", "pga", 100),
            StandingsEntry("b", "pga", 90),
            StandingsEntry("c", "pga", 90),
            StandingsEntry("d", "pga", 70),
        ]
        result = tiers(qualify_tour(entries, PlayoffSpotConfig(1, 1), include_ties=True))
        assert result == {"a": GOLD, "b": SILVER, "c": SILVER, "d": NONE}

    def test_ties_keep_input_order(self):
        entries = [StandingsEntry(name, "pga", 50) for name in ("x", "y", "z")]
        result = qualify_tour(entries, [1, 1])
        assert ids(result) == ["x", "y", "z"]
        assert tiers(result) == {"x": GOLD, "y": SILVER, "z": NONE}

    def test_zero_spots(self):
        entries = [StandingsEntry("a", "pga", 10), StandingsEntry("b", "pga", 5)]
        assert set(tiers(qualify_tour(entries, [0, 0])).values()) == {NONE}

    def test_more_spots_than_entries(self):
        entries = [StandingsEntry("a", "pga", 10), StandingsEntry("b", "pga", 5)]
        assert tiers(qualify_tour(entries, [15, 20])) == {"a": GOLD, "b": GOLD}

    def test_empty_tour(self):
        assert qualify_tour([], [15, 20]) == []


class TestQualify:
    """Tests for qualify function."""

    STANDINGS = [
        StandingsEntry("c1", "ccg", 300),
        StandingsEntry("p1", "pga", 500),
        StandingsEntry("c2", "ccg", 400),
        StandingsEntry("p2", "pga", 200),
        StandingsEntry("p3", "pga", 350),
    ]
    CONFIG = {
        "pga": PlayoffSpotConfig(1, 1),
        "ccg": [1, 0],
    }

    def test_preserves_input_order(self):
        assert ids(qualify(self.STANDINGS, self.CONFIG)) == ["c1", "p1", "c2", "p2", "p3"]

    def test_tours_ranked_separately(self):
        result = tiers(qualify(self.STANDINGS, self.CONFIG))
        assert result == {
            "p1": GOLD, "p3": SILVER, "p2": NONE,
            "c2": GOLD, "c1": NONE,
        }

    def test_unconfigured_tour_does_not_qualify(self):
        standings = self.STANDINGS + [StandingsEntry("x1", "other", 9999)]
        assert tiers(qualify(standings, self.CONFIG))["x1"] == NONE

    def test_does_not_mutate_input(self):
        qualify(self.STANDINGS, self.CONFIG)
        assert all(e.qualification_tier is None for e in self.STANDINGS)

    def test_empty_standings(self):
        assert qualify([], self.CONFIG) == []

    @pytest.mark.parametrize("spots", [[-1, 3], [2], [1.5, 2]])
    def test_bad_raw_spot_config_rejected(self, spots):
        standings = [StandingsEntry(f"g{i}", "g", 100 - i) for i in range(4)]
        with pytest.raises(ValueError):
            qualify(standings, {"g": spots})

    def test_bad_raw_spot_config_rejected_when_pooling(self):
        with pytest.raises(ValueError):
            pool_across_tours([StandingsEntry("a", "g", 10)], {"g": [-1, 3]})

    def test_idempotent(self):
        assert qualify(self.STANDINGS, self.CONFIG) == qualify(self.STANDINGS, self.CONFIG)


class TestPoolAcrossTours:
    """Tests for pool_across_tours function."""

    STANDINGS = [
        StandingsEntry("p2", "pga", 200),
        StandingsEntry("c1", "ccg", 300),
        StandingsEntry("p1", "pga", 500),
        StandingsEntry("p3", "pga", 100),
        StandingsEntry("c2", "ccg", 400),
        StandingsEntry("c3", "ccg", 10),
    ]
    CONFIG = {"pga": [1, 1], "ccg": [1, 1]}

    def test_pools_concatenate_tours(self):
        pools = pool_across_tours(self.STANDINGS, self.CONFIG)
        # pga appears first in the standings, so its qualifiers lead each pool
        assert ids(pools.pool_a) == ["p1", "c2"]
        assert ids(pools.pool_b) == ["p2", "c1"]
        assert ids(pools.unassigned) == ["p3", "c3"]

    def test_pool_entries_tagged(self):
        pools = pool_across_tours(self.STANDINGS, self.CONFIG)
        assert all(e.qualification_tier == GOLD for e in pools.pool_a)
        assert all(e.qualification_tier == SILVER for e in pools.pool_b)
        assert all(e.qualification_tier == NONE for e in pools.unassigned)

    def test_partition_is_complete_and_disjoint(self):
        pools = pool_across_tours(self.STANDINGS, self.CONFIG)
        all_ids = ids(pools.pool_a) + ids(pools.pool_b) + ids(pools.unassigned)
        assert len(all_ids) == len(self.STANDINGS)
        assert set(all_ids) == set(ids(self.STANDINGS))

    def test_empty_standings(self):
        pools = pool_across_tours([], {"pga": [15, 20]})
        assert pools.pool_a == []
        assert pools.pool_b == []
        assert pools.unassigned == []

    def test_matches_qualify(self):
        pools = pool_across_tours(self.STANDINGS, self.CONFIG)
        qualified = tiers(qualify(self.STANDINGS, self.CONFIG))
        assert {e.competitor_id for e in pools.pool_a} == {k for k, v in qualified.items() if v == GOLD}


class TestTotalSpots:
    """Tests for total_spots function."""

    def test_sums_tours(self):
        result = total_spots({"pga": (15, 20), "ccg": PlayoffSpotConfig(10, 5)})
        assert result == PlayoffSpotConfig(25, 25)

    def test_empty_config(self):
        assert total_spots({}).total == 0
