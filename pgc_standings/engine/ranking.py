"""
Leaderboard Ranking Engine

This module puts a tournament's score records into finish order and labels
each finish ("1", "T3", ...). It handles:
- Special statuses: active < cut < withdrawn < disqualified, whatever the score
- Missing scores, which sort last within their status group
- Live play: at equal score, competitors with fewer holes played sort first
- Tournament points/earnings, split evenly across tied positions
- Playoff payouts: gold and silver pools paid from separate table ranges

Usage:
    from pgc_standings.engine import rank_records, award_finish
"""

from dataclasses import replace
from itertools import groupby

from pgc_standings.config import (
    PAYOUT_FIELD_SIZE,
    PLAYOFF_PAID_EVENT,
    SCORE_SENTINEL,
    SILVER_PAYOUT_OFFSET,
    STATUS_LABELS,
)
from pgc_standings.engine.models import CompetitorStatus, FinishAward, QualificationTier, ScoreRecord, TierTable
from pgc_standings.engine.tables import split_positions
from pgc_standings.utils import format_position, round_half_away, setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def primary_key(record: ScoreRecord) -> tuple[int, int]:
    """
    Finish-order key: status priority first, then score (missing = sentinel).

    Two records tie for a finish exactly when their keys are equal.
    """
    # Status is compared before score, so an active record with no score still
    # ranks ahead of any cut one (unlike adding 444/888/999 offsets to scores)
    score = record.score if record.score is not None else SCORE_SENTINEL
    return record.status.priority, score


def sort_records(records) -> list[ScoreRecord]:
    """
    Order records best-first without labelling them.

    Sorting runs on `thru` first and then, stably, on the primary key, so
    among equal keys the competitor with fewer holes played comes first.
    """
    by_thru = sorted(records, key=lambda r: r.thru or 0)
    return sorted(by_thru, key=primary_key)


def rank_records(records) -> list[ScoreRecord]:
    """
    Rank score records and fill in each record's finish label.

    Args:
        records: Iterable of ScoreRecord (any order)

    Returns:
        New ScoreRecords in finish order, one per input record, with
        finish_rank set to the 1-based rank ("T"-prefixed when tied)
    """
    ordered = sort_records(records)
    ranked = []
    better_count = 0

    for _, group in groupby(ordered, key=primary_key):
        group = list(group)
        label = format_position(better_count + 1, len(group) > 1)
        ranked.extend(replace(record, finish_rank=label) for record in group)
        better_count += len(group)

    logger.debug(f"Ranked {len(ranked)} records")
    return ranked


def is_eliminated(status: CompetitorStatus) -> bool:
    """True for cut, withdrawn and disqualified competitors."""
    return status.is_eliminated


def award_finish(records, table: TierTable, offset: int = 0, limit: int | None = None) -> list[FinishAward]:
    """
    Points and earnings for each competitor's finish in a tournament.

    Active competitors split the points and payouts of the positions their
    tie group occupies, rounded to whole numbers. Cut, withdrawn and
    disqualified competitors earn nothing.

    Args:
        records: Iterable of ScoreRecord for one tour or playoff pool
        table: Tier table for the tournament
        offset: Table position where this field's payouts start
                (e.g. SILVER_PAYOUT_OFFSET for the silver playoff pool)
        limit: Exclusive upper bound on table positions paid

    Returns:
        One FinishAward per record, in finish order
    """
    ranked = rank_records(records)
    active = [r for r in ranked if not is_eliminated(r.status)]
    awards = []
    better_count = 0

    for key, group in groupby(active, key=primary_key):
        group = list(group)
        start = offset + better_count
        points = round_half_away(split_positions(table.points, start, len(group), limit))
        earnings = round_half_away(split_positions(table.payouts, start, len(group), limit))
        if len(group) > 1:
            logger.debug(f"{len(group)} tied at score {key[1]}: positions {start + 1}-{start + len(group)}")
        for record in group:
            awards.append(FinishAward(
                competitor_id=record.competitor_id,
                position=record.finish_rank,
                points=int(points),
                earnings=int(earnings),
            ))
        better_count += len(group)

    for record in ranked:
        if is_eliminated(record.status):
            awards.append(FinishAward(
                competitor_id=record.competitor_id,
                position=STATUS_LABELS[record.status.value],
            ))

    return awards


def award_playoff_finish(records, table: TierTable, tier: QualificationTier, event_number: int) -> list[FinishAward]:
    """
    Finish awards for one playoff pool in a playoff event.

    Playoff events award no points. Only the final event pays earnings:
    gold is paid from table positions 1-75, silver from positions 76-150.
    Non-qualifiers earn nothing.

    Args:
        records: Iterable of ScoreRecord for the pool's competitors
        table: Playoff tier table
        tier: Pool the competitors belong to
        event_number: 1-based playoff event number

    Returns:
        One FinishAward per record, in finish order
    """
    if tier is QualificationTier.POOL_A:
        awards = award_finish(records, table, limit=SILVER_PAYOUT_OFFSET)
    elif tier is QualificationTier.POOL_B:
        awards = award_finish(records, table, offset=SILVER_PAYOUT_OFFSET, limit=PAYOUT_FIELD_SIZE)
    else:
        awards = award_finish(records, TierTable())

    paid = event_number == PLAYOFF_PAID_EVENT
    logger.debug(f"Playoff event {event_number} ({tier.value}): {len(awards)} finishers, earnings paid: {paid}")
    return [
        replace(award, points=0, earnings=award.earnings if paid else 0)
        for award in awards
    ]
