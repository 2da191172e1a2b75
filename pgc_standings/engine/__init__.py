"""
Standings & Playoff Seeding Engine

Modules:
- models: Score records, standings entries, tier tables and results
- tables: Points/payout lookups by finish position
- ranking: Leaderboard finish order, tie labels and finish awards
- qualifier: Playoff pool assignment per tour and across tours
- strokes: Playoff starting-stroke allocation
"""

_EXPORTS = {
    "points_at": "pgc_standings.engine.tables",
    "payout_at": "pgc_standings.engine.tables",
    "slice_values": "pgc_standings.engine.tables",
    "rank_records": "pgc_standings.engine.ranking",
    "award_finish": "pgc_standings.engine.ranking",
    "award_playoff_finish": "pgc_standings.engine.ranking",
    "is_eliminated": "pgc_standings.engine.ranking",
    "qualify": "pgc_standings.engine.qualifier",
    "qualify_tour": "pgc_standings.engine.qualifier",
    "pool_across_tours": "pgc_standings.engine.qualifier",
    "total_spots": "pgc_standings.engine.qualifier",
    "allocate_strokes": "pgc_standings.engine.strokes",
    "allocate_strokes_from_positions": "pgc_standings.engine.strokes",
}


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name in _EXPORTS:
        import importlib
        return getattr(importlib.import_module(_EXPORTS[name]), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
