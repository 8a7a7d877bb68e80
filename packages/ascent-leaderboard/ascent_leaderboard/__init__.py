"""ascent-leaderboard - Asynchronous final score submission."""
from ascent_leaderboard.client import (
    LeaderboardClient,
    LeaderboardError,
    MockLeaderboard,
    SubmitResult,
)
from ascent_leaderboard.submitter import ScoreSubmitter
from ascent_leaderboard.systems import make_leaderboard_system

__all__ = [
    "LeaderboardClient",
    "LeaderboardError",
    "MockLeaderboard",
    "ScoreSubmitter",
    "SubmitResult",
    "make_leaderboard_system",
]
