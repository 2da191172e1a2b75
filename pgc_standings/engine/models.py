"""
Data models for the standings engine.

All records are frozen: the engine returns new records with derived
fields filled in and never mutates what callers pass in.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from pgc_standings.config import STATUS_ALIASES, STATUS_PRIORITY
from pgc_standings.utils import validate_spot_config, validate_tier_table


class CompetitorStatus(Enum):
    """
    A competitor's standing in one scoring context.

    ACTIVE: Still in the event (or finished normally)
    CUT: Missed the cut
    WITHDRAWN: Withdrew
    DISQUALIFIED: Disqualified
    """

    ACTIVE = "active"
    CUT = "cut"
    WITHDRAWN = "withdrawn"
    DISQUALIFIED = "disqualified"

    @property
    def priority(self) -> int:
        """Finish-order group; lower ranks ahead of higher."""
        return STATUS_PRIORITY[self.value]

    @property
    def is_eliminated(self) -> bool:
        return self is not CompetitorStatus.ACTIVE

    @classmethod
    def from_label(cls, label: Optional[str]) -> Optional["CompetitorStatus"]:
        """Map an upstream label ("CUT", "WD", "dq", None) to a status, or None if unknown."""
        key = (label or "").strip()
        value = STATUS_ALIASES.get(key.upper())
        if value is None:
            try:
                return cls(key.lower())
            except ValueError:
                return None
        return cls(value)


class QualificationTier(Enum):
    """Playoff pool a standings entry falls into."""

    NONE = "none"
    POOL_A = "gold"
    POOL_B = "silver"


@dataclass(frozen=True)
class ScoreRecord:
    """
    One competitor's state in a tournament round or cumulative event.

    Attributes:
        competitor_id: Opaque identifier
        score: Score relative to par, None if unknown
        thru: Holes completed so far (0 if not started)
        status: Active, cut, withdrawn or disqualified
        finish_rank: "3" / "T3", filled in by rank_records()
    """
    competitor_id: str
    score: Optional[int] = None
    thru: int = 0
    status: CompetitorStatus = CompetitorStatus.ACTIVE
    finish_rank: Optional[str] = None


@dataclass(frozen=True)
class StandingsEntry:
    """
    One competitor's season-to-date points on a tour.

    Attributes:
        competitor_id: Opaque identifier
        tour_id: Tour the points were earned on
        points: Season points (ties expected)
        qualification_tier: Filled in by qualify()
    """
    competitor_id: str
    tour_id: str
    points: float = 0
    qualification_tier: Optional[QualificationTier] = None


@dataclass(frozen=True)
class TierTable:
    """Position-indexed points and payouts for one competitive tier (index 0 = 1st)."""
    points: Tuple[float, ...] = ()
    payouts: Tuple[float, ...] = ()

    @classmethod
    def from_config(cls, points, payouts) -> "TierTable":
        """Build a table from season configuration, validating array lengths."""
        validate_tier_table(points, payouts)
        return cls(points=tuple(points), payouts=tuple(payouts))

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class PlayoffSpotConfig:
    """How many of a tour's top standings go to pool A (gold) and pool B (silver)."""
    pool_a_spots: int = 0
    pool_b_spots: int = 0

    @classmethod
    def from_config(cls, spots) -> "PlayoffSpotConfig":
        """Build from a tour's 2-element [gold, silver] array, validating it."""
        validate_spot_config(spots)
        return cls(pool_a_spots=spots[0], pool_b_spots=spots[1])

    @property
    def total(self) -> int:
        return self.pool_a_spots + self.pool_b_spots


@dataclass(frozen=True)
class StartingStrokeResult:
    """Playoff stroke allowance for one qualifier, rounded to one decimal."""
    competitor_id: str
    strokes: float


@dataclass(frozen=True)
class FinishAward:
    """Points and earnings for one tournament finish."""
    competitor_id: str
    position: Optional[str]
    points: float = 0
    earnings: float = 0


@dataclass(frozen=True)
class PlayoffPools:
    """
    Season-wide playoff pools built from every tour's qualifiers.

    Attributes:
        pool_a: Gold qualifiers, tour by tour
        pool_b: Silver qualifiers, tour by tour
        unassigned: Everyone else
    """
    pool_a: list = field(default_factory=list)
    pool_b: list = field(default_factory=list)
    unassigned: list = field(default_factory=list)
