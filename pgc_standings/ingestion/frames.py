"""
DataFrame Bridge

Converts the tabular data handed over by the data layer into engine records,
and engine results back into DataFrames for the rendering layer.

Expected input columns:
- scores:    competitor_id, score, thru (optional), status (optional)
- standings: competitor_id, tour_id, points

Usage:
    from pgc_standings.ingestion import score_records_from_frame, standings_from_frame
"""

from dataclasses import asdict

import pandas as pd

from pgc_standings.engine.models import CompetitorStatus, StandingsEntry, ScoreRecord
from pgc_standings.utils import POSITION_RE, setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

SCORE_COLUMNS = ("competitor_id", "score")
STANDINGS_COLUMNS = ("competitor_id", "tour_id", "points")


def _require_columns(df: pd.DataFrame, columns, label: str) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f"{label} frame is missing columns: {', '.join(missing)}")


def _optional(value):
    """None for NaN/NA cells, the value otherwise."""
    return None if pd.isna(value) else value


def parse_status(label) -> CompetitorStatus:
    """
    Status for an upstream status or position label.

    Numeric positions ("T3", "12") and blanks mean the competitor is active.
    Unknown labels are logged and treated as active.
    """
    label = _optional(label)
    if label is None:
        return CompetitorStatus.ACTIVE
    label = str(label)
    status = CompetitorStatus.from_label(label)
    if status is not None:
        return status
    if not POSITION_RE.search(label):
        logger.warning(f"Unknown status '{label}', treating as active")
    return CompetitorStatus.ACTIVE


def score_records_from_frame(df: pd.DataFrame) -> list[ScoreRecord]:
    """
    Build ScoreRecords from a scores DataFrame.

    Args:
        df: DataFrame with columns [competitor_id, score] and optionally [thru, status]

    Returns:
        One ScoreRecord per row, in row order

    Raises:
        ValueError: If a required column is missing
    """
    _require_columns(df, SCORE_COLUMNS, "Scores")
    records = []

    for row in df.to_dict("records"):
        score = _optional(row["score"])
        thru = _optional(row.get("thru"))
        records.append(ScoreRecord(
            competitor_id=str(row["competitor_id"]),
            score=int(score) if score is not None else None,
            thru=int(thru) if thru is not None else 0,
            status=parse_status(row.get("status")),
        ))

    logger.debug(f"Loaded {len(records)} score records")
    return records


def standings_from_frame(df: pd.DataFrame) -> list[StandingsEntry]:
    """
    Build StandingsEntries from a season standings DataFrame.

    Args:
        df: DataFrame with columns [competitor_id, tour_id, points]

    Returns:
        One StandingsEntry per row, in row order (missing points count as 0)

    Raises:
        ValueError: If a required column is missing
    """
    _require_columns(df, STANDINGS_COLUMNS, "Standings")
    entries = [
        StandingsEntry(
            competitor_id=str(row["competitor_id"]),
            tour_id=str(row["tour_id"]),
            points=_optional(row["points"]) or 0,
        )
        for row in df.to_dict("records")
    ]
    logger.debug(f"Loaded {len(entries)} standings entries")
    return entries


def _enum_values(row: dict) -> dict:
    return {k: (v.value if hasattr(v, "value") else v) for k, v in row.items()}


def records_to_frame(records) -> pd.DataFrame:
    """Ranked ScoreRecords as a DataFrame (status as its string value)."""
    columns = ["competitor_id", "score", "thru", "status", "finish_rank"]
    return pd.DataFrame([_enum_values(asdict(r)) for r in records], columns=columns)


def standings_to_frame(entries) -> pd.DataFrame:
    """StandingsEntries as a DataFrame (qualification_tier as "gold"/"silver"/"none")."""
    columns = ["competitor_id", "tour_id", "points", "qualification_tier"]
    return pd.DataFrame([_enum_values(asdict(e)) for e in entries], columns=columns)


def strokes_to_frame(results) -> pd.DataFrame:
    """StartingStrokeResults as a DataFrame."""
    return pd.DataFrame([asdict(r) for r in results], columns=["competitor_id", "strokes"])


def awards_to_frame(awards) -> pd.DataFrame:
    """FinishAwards as a DataFrame."""
    columns = ["competitor_id", "position", "points", "earnings"]
    return pd.DataFrame([asdict(a) for a in awards], columns=columns)
