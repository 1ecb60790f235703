"""
Dungeon Rush.

Rules engine for an asymmetric two-phase dungeon-crawl board game: the
Defense lays hidden trap columns, the Offense spends gold to push units
across them.
"""

__version__ = "0.1.0"
