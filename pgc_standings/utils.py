"""
Shared utilities for the PGC standings engine.

This module provides common functions used across multiple modules
to avoid code duplication.
"""

import logging
import re
from decimal import Decimal, ROUND_HALF_UP

# --- Shared Regex Patterns for Position Labels ---
# Position: "T15", "15", "t3" (tie prefix optional)
POSITION_RE = re.compile(r"\d+")


# --- Logging Setup ---
def setup_logging(name: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (usually __name__ from the calling module)
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


# --- Position Labels ---
def format_position(rank: int, tied: bool) -> str:
    """Build a finish label such as "3" or "T3"."""
    return f"T{rank}" if tied else str(rank)


def parse_position(position) -> int | None:
    """
    Parse a finish label ("T15", "15") or number to an int.

    Args:
        position: Label string, int, or None

    Returns:
        Numeric position, or None if the label holds no digits
    """
    if isinstance(position, bool):
        return None
    if isinstance(position, int):
        return position
    if isinstance(position, str):
        match = POSITION_RE.search(position)
        if match:
            return int(match.group(0))
    return None


def position_change(past_position, current_position) -> int:
    """
    Places gained since the previous standings (positive = moved up).

    Returns 0 if either position is missing or unparsable.
    """
    past = parse_position(past_position)
    current = parse_position(current_position)
    if past is None or current is None:
        return 0
    return past - current


# --- Rounding ---
def round_half_away(value: float, decimals: int = 0) -> float:
    """
    Round to `decimals` places, with halves going away from zero.

    Goes through the shortest decimal repr of the float so that values
    such as 2.45 round to 2.5 rather than being pulled down by binary
    representation error.
    """
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


# --- Validation ---
def validate_tier_table(points, payouts) -> None:
    """
    Validate that a tier's points and payouts arrays line up.

    Args:
        points: Position-indexed points (index 0 = 1st place)
        payouts: Position-indexed payouts

    Raises:
        ValueError: If the two arrays differ in length
    """
    # Playoff stroke tables carry negative values, so signs are not checked
    if len(points) != len(payouts):
        raise ValueError(
            f"Tier table length mismatch: {len(points)} points, "
            f"{len(payouts)} payouts"
        )


def validate_spot_config(spots) -> None:
    """
    Validate a tour's [gold, silver] playoff spot counts.

    Raises:
        ValueError: If not exactly two non-negative integers
    """
    if len(spots) != 2:
        raise ValueError(f"Playoff spots must have 2 entries, got {len(spots)}")
    for count in spots:
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ValueError(f"Playoff spot counts must be non-negative integers, got {count!r}")


__all__ = [
    # Logging
    'setup_logging',
    # Position labels
    'POSITION_RE',
    'format_position',
    'parse_position',
    'position_change',
    # Rounding
    'round_half_away',
    # Validation
    'validate_tier_table',
    'validate_spot_config',
]
