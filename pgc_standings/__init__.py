"""
PGC Standings - Core Package

This package contains the core modules for:
- Leaderboard ranking, playoff qualification and starting strokes (pgc_standings.engine)
- DataFrame conversion for upstream/downstream layers (pgc_standings.ingestion)
- Shared configuration and utilities
"""

from pgc_standings.config import *
