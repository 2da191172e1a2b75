"""
Playoff Qualification

Splits each tour's season standings into playoff pools:
- Pool A (gold): the tour's top N by points
- Pool B (silver): the next M
- Everyone else does not qualify

The cutline is positional by default: a competitor tied on points with the
last gold qualifier but one place lower goes to silver. Setting
CUTLINE_INCLUDES_TIES promotes everyone tied with the last qualifier instead.

Usage:
    from pgc_standings.engine import qualify, pool_across_tours
"""

from dataclasses import replace

from pgc_standings.config import CUTLINE_INCLUDES_TIES
from pgc_standings.engine.models import PlayoffPools, PlayoffSpotConfig, QualificationTier, StandingsEntry
from pgc_standings.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def _as_spot_config(spots) -> PlayoffSpotConfig:
    """Accept a PlayoffSpotConfig or a raw [gold, silver] array (validated)."""
    if isinstance(spots, PlayoffSpotConfig):
        return spots
    return PlayoffSpotConfig.from_config(spots)


def sort_by_points(entries) -> list[StandingsEntry]:
    """Standings best-first; entries on equal points keep their input order."""
    return sorted(entries, key=lambda e: e.points, reverse=True)


def _tier_for(position: int, points, ordered, spots: PlayoffSpotConfig, include_ties: bool) -> QualificationTier:
    """Tier for the entry at 1-based `position` in a tour's points order."""
    a_end = spots.pool_a_spots
    b_end = spots.total

    if position <= a_end:
        return QualificationTier.POOL_A
    if include_ties and 0 < a_end <= len(ordered) and points == ordered[a_end - 1].points:
        return QualificationTier.POOL_A
    if position <= b_end:
        return QualificationTier.POOL_B
    if include_ties and spots.pool_b_spots > 0 and 0 < b_end <= len(ordered) and points == ordered[b_end - 1].points:
        return QualificationTier.POOL_B
    return QualificationTier.NONE


def qualify_tour(entries, spots, include_ties: bool = CUTLINE_INCLUDES_TIES) -> list[StandingsEntry]:
    """
    Assign playoff tiers within a single tour.

    Args:
        entries: StandingsEntry list for one tour
        spots: PlayoffSpotConfig or [gold, silver] counts
        include_ties: Promote entries tied with the last qualifier of a pool

    Returns:
        New entries sorted by points (best first) with qualification_tier set
    """
    spots = _as_spot_config(spots)
    ordered = sort_by_points(entries)
    return [
        replace(entry, qualification_tier=_tier_for(position, entry.points, ordered, spots, include_ties))
        for position, entry in enumerate(ordered, start=1)
    ]


def _group_by_tour(standings) -> dict[str, list[int]]:
    """Indices of the standings for each tour, tours in order of first appearance."""
    groups: dict[str, list[int]] = {}
    for index, entry in enumerate(standings):
        groups.setdefault(entry.tour_id, []).append(index)
    return groups


def _spots_for(tour_id, config) -> PlayoffSpotConfig:
    spots = config.get(tour_id)
    if spots is None:
        logger.warning(f"No playoff spots configured for tour '{tour_id}'; nobody qualifies from it")
        return PlayoffSpotConfig()
    return _as_spot_config(spots)


def qualify(standings, config, include_ties: bool = CUTLINE_INCLUDES_TIES) -> list[StandingsEntry]:
    """
    Assign each standings entry its playoff tier, tour by tour.

    Args:
        standings: StandingsEntry list covering any number of tours
        config: Mapping of tour_id -> PlayoffSpotConfig (or [gold, silver])
        include_ties: Promote entries tied with the last qualifier of a pool

    Returns:
        New entries in the input order with qualification_tier set
    """
    standings = list(standings)
    result: list[StandingsEntry | None] = [None] * len(standings)

    for tour_id, indices in _group_by_tour(standings).items():
        # Same stable ordering qualify_tour() applies to the entries
        ordered = sorted(indices, key=lambda i: standings[i].points, reverse=True)
        tiered = qualify_tour([standings[i] for i in indices], _spots_for(tour_id, config), include_ties)
        for index, entry in zip(ordered, tiered):
            result[index] = entry

    logger.debug(f"Qualified {len(result)} standings entries across {len(config)} configured tours")
    return result


def pool_across_tours(standings, config, include_ties: bool = CUTLINE_INCLUDES_TIES) -> PlayoffPools:
    """
    Gather every tour's qualifiers into season-wide gold and silver pools.

    Pools are concatenated tour by tour (tours in order of first appearance,
    each tour's qualifiers best-first); nothing is re-sorted across tours.

    Returns:
        PlayoffPools with pool_a, pool_b and the unassigned remainder
    """
    standings = list(standings)
    pools = PlayoffPools()
    targets = {
        QualificationTier.POOL_A: pools.pool_a,
        QualificationTier.POOL_B: pools.pool_b,
        QualificationTier.NONE: pools.unassigned,
    }

    for tour_id, indices in _group_by_tour(standings).items():
        tour_entries = [standings[i] for i in indices]
        for entry in qualify_tour(tour_entries, _spots_for(tour_id, config), include_ties):
            targets[entry.qualification_tier].append(entry)

    logger.debug(
        f"Playoff pools: {len(pools.pool_a)} gold, {len(pools.pool_b)} silver, "
        f"{len(pools.unassigned)} unassigned"
    )
    return pools


def total_spots(config) -> PlayoffSpotConfig:
    """Season-wide gold and silver spot counts summed over every tour."""
    configs = [_as_spot_config(spots) for spots in config.values()]
    return PlayoffSpotConfig(
        pool_a_spots=sum(c.pool_a_spots for c in configs),
        pool_b_spots=sum(c.pool_b_spots for c in configs),
    )
