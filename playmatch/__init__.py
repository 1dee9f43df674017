"""
Playmatch

Match-proposal service for board-game players: interval-based availability,
pairwise compatibility scoring and ranked session proposals.
"""

__version__ = "1.0.0"
