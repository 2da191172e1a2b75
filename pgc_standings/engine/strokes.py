"""
Playoff Starting Strokes

Each playoff qualifier starts the playoffs with a stroke allowance taken from
the playoff tier's points table by regular-season finish within their pool.
Tied competitors share the positions they occupy: the table values of those
positions are summed and split evenly, then rounded to one decimal place
(halves away from zero).

Two entry points:
- allocate_strokes: first playoff event, ordered by season points
- allocate_strokes_from_positions: later playoff events, ordered by
  cumulative playoff position

Usage:
    from pgc_standings.engine import allocate_strokes
"""

from collections import Counter

from pgc_standings.config import STROKE_DECIMALS
from pgc_standings.engine.models import StartingStrokeResult, TierTable
from pgc_standings.engine.tables import points_at, split_positions
from pgc_standings.utils import round_half_away, setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def _better_counts(values, higher_is_better: bool) -> dict:
    """
    Number of competitors strictly better than each distinct value.

    Run-length over the sorted distinct values instead of rescanning the
    pool for every competitor.
    """
    counts = Counter(values)
    better = {}
    seen = 0
    for value in sorted(counts, reverse=higher_is_better):
        better[value] = seen
        seen += counts[value]
    return better


def _strokes_for(better_count: int, tied_count: int, table: TierTable) -> float:
    if tied_count <= 1:
        strokes = points_at(table, better_count)
    else:
        strokes = split_positions(table.points, better_count, tied_count)
    return round_half_away(strokes, STROKE_DECIMALS)


def _allocate(competitors, table: TierTable, higher_is_better: bool) -> list[StartingStrokeResult]:
    """competitors: list of (competitor_id, standing value) pairs."""
    values = [value for _, value in competitors]
    counts = Counter(values)
    better = _better_counts(values, higher_is_better)

    results = [
        StartingStrokeResult(
            competitor_id=competitor_id,
            strokes=_strokes_for(better[value], counts[value], table),
        )
        for competitor_id, value in competitors
    ]

    tie_groups = sum(1 for n in counts.values() if n > 1)
    logger.debug(f"Allocated starting strokes to {len(results)} competitors ({tie_groups} tie groups)")
    return results


def allocate_strokes(pool, table: TierTable) -> list[StartingStrokeResult]:
    """
    Starting strokes for a playoff pool from regular-season points.

    Args:
        pool: StandingsEntry list for one pool (gold or silver)
        table: Playoff tier table whose points hold the stroke values

    Returns:
        One StartingStrokeResult per pool entry, in pool order
    """
    return _allocate([(e.competitor_id, e.points) for e in pool], table, higher_is_better=True)


def allocate_strokes_from_positions(positions, table: TierTable) -> list[StartingStrokeResult]:
    """
    Starting strokes from cumulative playoff positions (1 = leader).

    Used once the playoffs are under way: competitors sharing a cumulative
    position split the strokes of the positions they occupy.

    Args:
        positions: Mapping of competitor_id -> cumulative position
        table: Playoff tier table whose points hold the stroke values

    Returns:
        One StartingStrokeResult per competitor, in mapping order
    """
    return _allocate(list(positions.items()), table, higher_is_better=False)
