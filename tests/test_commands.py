from candyboard import get_store


def test_seed_demo(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=["seed-demo", "--users", "3", "--min-games", "2", "--max-games", "2"])

    assert result.exit_code == 0, result.output
    with app.app_context():
        store = get_store()
        assert len(store.users) == 3
        assert len(store.games) == 6


def test_seed_demo_rejects_bad_range(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=["seed-demo", "--min-games", "5", "--max-games", "1"])
    assert result.exit_code != 0
