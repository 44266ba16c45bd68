from candyboard.models import GameRecord, User
from candyboard.utils.stats import build_global_stats, build_leaderboard, round_half_up


def games(*rows):
    return [GameRecord(id=i, username=name, score=score)
            for i, (name, score) in enumerate(rows, start=1)]


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.49) == 2
    assert round_half_up(-0.5) == 0


def test_average_rounds_half_up():
    entry = build_leaderboard(games(("a", 1), ("a", 2)))[0]
    assert entry["avg_score"] == 2


def test_float_scores():
    entry = build_leaderboard(games(("a", 1.5), ("a", 3.25)))[0]
    assert entry["best_score"] == 3.25
    assert entry["avg_score"] == 2


def test_global_stats_with_users_but_no_games():
    users = [User(id=1, username="a")]
    assert build_global_stats(users, []) == {
        "total_users": 1,
        "total_games": 0,
        "avg_score": 0,
        "highest_score": 0
    }


def test_non_finite_average_is_null():
    assert round_half_up(float("inf")) is None
    entry = build_leaderboard(games(("a", 1.7e308), ("a", 1.7e308)))[0]
    assert entry["best_score"] == 1.7e308
    assert entry["avg_score"] is None


def test_average_of_huge_integers_is_null():
    big = 10 ** 308
    stats = build_global_stats([], games(("a", big), ("b", big)))
    assert stats["avg_score"] is None
    assert stats["highest_score"] == big
