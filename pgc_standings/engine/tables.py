"""
Points & Payout Table Lookups

Read-only access to a tier's position-indexed points and payouts.
Positions beyond the paid/scored field are worth nothing rather than
being an error, so every lookup here is total.
"""

import numpy as np

from pgc_standings.engine.models import TierTable


def _value_at(values, index: int) -> float:
    if 0 <= index < len(values):
        return values[index]
    return 0


def points_at(table: TierTable, index: int) -> float:
    """Points for zero-based finish position `index`, 0 outside the table."""
    return _value_at(table.points, index)


def payout_at(table: TierTable, index: int) -> float:
    """Payout for zero-based finish position `index`, 0 outside the table."""
    return _value_at(table.payouts, index)


def slice_values(values, start: int, end: int) -> list:
    """
    Sub-array of position-indexed values covering positions [start, end).

    Bounds are clipped to the table; if start >= end the result is empty.
    """
    start = max(start, 0)
    end = min(end, len(values))
    if start >= end:
        return []
    return list(values[start:end])


def split_positions(values, start: int, count: int, limit: int | None = None) -> float:
    """
    Share of the positions [start, start + count) held by each of `count` tied competitors.

    The total value of the occupied positions is divided evenly by `count`;
    positions beyond the table (or beyond `limit`) contribute nothing.

    Args:
        values: Position-indexed points or payouts
        start: First zero-based position the tie group occupies
        count: Size of the tie group
        limit: Optional exclusive upper bound on positions paid

    Returns:
        Unrounded per-competitor share, 0 for an empty group
    """
    if count <= 0:
        return 0.0
    end = start + count
    if limit is not None:
        end = min(end, limit)
    occupied = slice_values(values, start, end)
    if not occupied:
        return 0.0
    return float(np.sum(occupied)) / count
