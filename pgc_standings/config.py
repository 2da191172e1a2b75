"""
Central configuration for the PGC standings engine.

All shared constants and configuration values should be defined here
to avoid duplication and ensure consistency across modules.
"""

# --- Score Handling ---
SCORE_SENTINEL = 999  # Stand-in for a missing score, sorts last within its status

# Finish order between statuses: lower priority always ranks ahead,
# whatever the numeric score.
STATUS_PRIORITY = {
    "active": 0,
    "cut": 1,
    "withdrawn": 2,
    "disqualified": 3,
}

# Upstream position/status labels mapped to status values
STATUS_ALIASES = {
    "": "active",
    "ACTIVE": "active",
    "CUT": "cut",
    "WD": "withdrawn",
    "WITHDRAWN": "withdrawn",
    "DQ": "disqualified",
    "DISQUALIFIED": "disqualified",
}

# --- Playoff Configuration ---
# [gold, silver] spots per tour
DEFAULT_PLAYOFF_SPOTS = (15, 20)

# Strict positional cutline (False) or promote everyone tied with the
# last qualifier (True)
CUTLINE_INCLUDES_TIES = False

# --- Starting Strokes ---
STROKE_DECIMALS = 1

# --- Payouts ---
# Gold playoff pool is paid from positions 1-75 of the tier table,
# silver from positions 76-150
SILVER_PAYOUT_OFFSET = 75
PAYOUT_FIELD_SIZE = 150

# Only the final playoff event pays earnings; no playoff event awards points
PLAYOFF_PAID_EVENT = 3

# Display labels for eliminated statuses
STATUS_LABELS = {
    "cut": "CUT",
    "withdrawn": "WD",
    "disqualified": "DQ",
}
