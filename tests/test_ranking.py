"""Tests for score aggregation and leaderboard ranking."""

from judgeboard.models import Judge, Score, Team
from judgeboard.services.ranking import compute_leaderboard, judge_totals, team_totals


def score(team_id, value, judge_id=1, category_id=1):
    return Score(team_id=team_id, judge_id=judge_id, category_id=category_id, score=value)


class TestTeamTotals:
    def test_sums_per_team(self):
        totals = team_totals([score(1, 8), score(1, 7), score(2, 3)])
        assert totals == {1: 15, 2: 3}

    def test_empty(self):
        assert team_totals([]) == {}


class TestComputeLeaderboard:
    def test_two_judges_two_categories(self):
        """Judge A gives 8+7 and judge B gives 6+9: team X totals 30."""
        teams = [Team(id=1, name="Team X")]
        scores = [
            score(1, 8, judge_id=1, category_id=1),
            score(1, 7, judge_id=1, category_id=2),
            score(1, 6, judge_id=2, category_id=1),
            score(1, 9, judge_id=2, category_id=2),
        ]
        [entry] = compute_leaderboard(scores, teams)
        assert entry.team_name == "Team X"
        assert entry.total_score == 30
        assert entry.rank == 1

    def test_team_without_scores_ranked_last_with_zero(self):
        teams = [Team(id=1, name="Team Y"), Team(id=2, name="Team X")]
        entries = compute_leaderboard([score(2, 4)], teams)
        assert [(e.team_name, e.total_score, e.rank) for e in entries] == [
            ("Team X", 4, 1),
            ("Team Y", 0, 2),
        ]

    def test_every_team_appears_once(self):
        teams = [Team(id=i, name=f"T{i}") for i in range(1, 6)]
        scores = [score(1, 5), score(3, 2), score(3, 9), score(5, 1)]
        entries = compute_leaderboard(scores, teams)
        assert sorted(e.team_id for e in entries) == [1, 2, 3, 4, 5]
        totals = {e.team_id: e.total_score for e in entries}
        assert totals == {1: 5, 2: 0, 3: 11, 4: 0, 5: 1}

    def test_sorted_non_increasing(self):
        teams = [Team(id=i, name=f"T{i}") for i in range(1, 8)]
        scores = [score(i, (i * 7) % 5) for i in range(1, 8)]
        entries = compute_leaderboard(scores, teams)
        totals = [e.total_score for e in entries]
        assert totals == sorted(totals, reverse=True)
        assert [e.rank for e in entries] == list(range(1, 8))

    def test_ties_get_consecutive_ranks_ordered_by_name(self):
        """Equal totals still consume distinct ranks; name decides the order."""
        teams = [Team(id=1, name="zeta"), Team(id=2, name="Alpha"), Team(id=3, name="beta")]
        scores = [score(1, 5), score(2, 5), score(3, 5)]
        entries = compute_leaderboard(scores, teams)
        assert [(e.team_name, e.rank) for e in entries] == [
            ("Alpha", 1),
            ("beta", 2),
            ("zeta", 3),
        ]

    def test_tie_break_ignores_input_order(self):
        teams = [Team(id=1, name="B"), Team(id=2, name="A")]
        forward = compute_leaderboard([score(1, 3), score(2, 3)], teams)
        backward = compute_leaderboard([score(2, 3), score(1, 3)], list(reversed(teams)))
        assert forward == backward

    def test_scores_for_unknown_teams_are_ignored(self):
        entries = compute_leaderboard([score(99, 10)], [Team(id=1, name="Only")])
        assert [(e.team_id, e.total_score) for e in entries] == [(1, 0)]

    def test_no_teams(self):
        assert compute_leaderboard([score(1, 3)], []) == []

    def test_to_dict(self):
        [entry] = compute_leaderboard([], [Team(id=4, name="Solo")])
        assert entry.to_dict() == {
            "team_id": 4,
            "team_name": "Solo",
            "total_score": 0,
            "rank": 1,
        }


class TestJudgeTotals:
    def test_groups_by_judge(self):
        judges = [Judge(id=1, name="Bea"), Judge(id=2, name="Al")]
        scores = [
            score(1, 8, judge_id=1, category_id=10),
            score(1, 7, judge_id=1, category_id=11),
            score(1, 6, judge_id=2, category_id=10),
        ]
        grouped = judge_totals(scores, judges)
        assert [(g.judge_name, g.total) for g in grouped] == [("Al", 6), ("Bea", 15)]
        assert grouped[1].categories == {10: 8, 11: 7}

    def test_judges_without_scores_are_left_out(self):
        judges = [Judge(id=1, name="Bea"), Judge(id=2, name="Al")]
        grouped = judge_totals([score(1, 2, judge_id=1)], judges)
        assert [g.judge_id for g in grouped] == [1]
