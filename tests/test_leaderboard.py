def seed(client, games):
    for username, score in games:
        resp = client.post('/api/games', json={"username": username, "score": score})
        assert resp.status_code == 201


def test_leaderboard_aggregates_per_user(client):
    client.post('/api/users/register', json={"username": "alice"})
    seed(client, [("alice", 10), ("alice", 50), ("alice", 30)])

    resp = client.get('/api/leaderboard')
    assert resp.status_code == 200
    assert resp.get_json()["data"] == [
        {"username": "alice", "best_score": 50, "total_games": 3, "avg_score": 30}
    ]


def test_leaderboard_sorted_by_best_score(client):
    seed(client, [("alice", 100), ("bob", 150), ("cara", 120), ("alice", 90)])

    data = client.get('/api/leaderboard').get_json()["data"]
    assert [row["username"] for row in data] == ["bob", "cara", "alice"]


def test_leaderboard_ties_keep_first_appearance_order(client):
    seed(client, [("zed", 40), ("amy", 40), ("bob", 10)])

    data = client.get('/api/leaderboard').get_json()["data"]
    assert [row["username"] for row in data] == ["zed", "amy", "bob"]


def test_leaderboard_empty(client):
    assert client.get('/api/leaderboard').get_json() == {"success": True, "data": []}


def test_stats_empty_service(client):
    resp = client.get('/api/stats')
    assert resp.get_json()["data"] == {
        "total_users": 0,
        "total_games": 0,
        "avg_score": 0,
        "highest_score": 0
    }


def test_stats_counts_all_games(client):
    client.post('/api/users/register', json={"username": "alice"})
    seed(client, [("alice", 10), ("ghost", 25)])

    data = client.get('/api/stats').get_json()["data"]
    assert data == {
        "total_users": 1,
        "total_games": 2,
        "avg_score": 18,
        "highest_score": 25
    }
