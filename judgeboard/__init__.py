"""Role-based judging service: scoring, comments and a public leaderboard."""

__version__ = "0.1.0"
