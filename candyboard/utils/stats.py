import math


def round_half_up(value):
    """Round to the nearest integer with .5 going up, matching the game client's rounding.

    Returns None for inf/nan, which serializes as null.
    """
    if not math.isfinite(value):
        return None
    return int(math.floor(value + 0.5))


def average_score(total, count):
    """Rounded mean, or None when the total no longer fits in a float"""
    try:
        return round_half_up(total / count)
    except OverflowError:
        return None


def build_leaderboard(games):
    """
    Aggregate game records into per-user leaderboard entries.

    Entries are grouped in order of each username's first appearance and then
    sorted by best score, highest first. The sort is stable, so users with the
    same best score keep their first-appearance order.

    Args:
        games (list[GameRecord]): All recorded games

    Returns:
        list[dict]: username, best_score, total_games, avg_score per user
    """
    grouped = {}
    for game in games:
        entry = grouped.get(game.username)
        if entry is None:
            grouped[game.username] = {
                "username": game.username,
                "best_score": game.score,
                "total_games": 1,
                "total_score": game.score
            }
            continue

        entry["total_games"] += 1
        entry["total_score"] += game.score
        if game.score > entry["best_score"]:
            entry["best_score"] = game.score

    leaderboard = []
    for entry in grouped.values():
        leaderboard.append({
            "username": entry["username"],
            "best_score": entry["best_score"],
            "total_games": entry["total_games"],
            "avg_score": average_score(entry["total_score"], entry["total_games"])
        })

    return sorted(leaderboard, key=lambda x: x["best_score"], reverse=True)


def build_global_stats(users, games):
    """Totals across the whole service, zero-filled when nothing has been played"""
    if not games:
        return {
            "total_users": len(users),
            "total_games": 0,
            "avg_score": 0,
            "highest_score": 0
        }

    scores = [g.score for g in games]
    return {
        "total_users": len(users),
        "total_games": len(games),
        "avg_score": average_score(sum(scores), len(scores)),
        "highest_score": max(scores)
    }
