"""Service layer helpers."""

from .identity import Identity, IdentitySession, resolve_admin, resolve_judge, resolve_team
from .ranking import LeaderboardEntry, compute_leaderboard, judge_totals, team_totals
from .reports import judge_sheet, judge_team_scores, load_leaderboard, team_breakdown
from .scoring import SubmissionResult, submit_scores, validate_scores

__all__ = [
    "Identity",
    "IdentitySession",
    "LeaderboardEntry",
    "SubmissionResult",
    "compute_leaderboard",
    "judge_sheet",
    "judge_team_scores",
    "judge_totals",
    "load_leaderboard",
    "resolve_admin",
    "resolve_judge",
    "resolve_team",
    "submit_scores",
    "team_breakdown",
    "team_totals",
    "validate_scores",
]
