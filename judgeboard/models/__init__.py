"""Database model exports."""

from .admin import AdminAccount
from .category import ScoreCategory
from .comment import Comment
from .judge import Judge
from .score import Score
from .team import Team

__all__ = [
    "AdminAccount",
    "Comment",
    "Judge",
    "Score",
    "ScoreCategory",
    "Team",
]
