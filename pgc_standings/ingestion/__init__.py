"""
Data Ingestion

Modules:
- frames: Convert pandas DataFrames to engine records and results back to DataFrames
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name in (
        "score_records_from_frame",
        "standings_from_frame",
        "records_to_frame",
        "standings_to_frame",
        "strokes_to_frame",
        "awards_to_frame",
    ):
        from pgc_standings.ingestion import frames
        return getattr(frames, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
