import click
from flask.cli import with_appcontext
from candyboard import get_store
from candyboard.utils.dummy_data import generate_dummy_data


@click.command('seed-demo')
@click.option('--users', 'num_users', default=10, show_default=True,
              help='Number of users to register.')
@click.option('--min-games', default=1, show_default=True)
@click.option('--max-games', default=10, show_default=True)
@click.option('--reset/--no-reset', default=False,
              help='Clear the store before seeding.')
@with_appcontext
def seed_demo_command(num_users, min_games, max_games, reset):
    """Fill the in-memory store with random users and games."""
    if min_games > max_games:
        raise click.BadParameter('--min-games cannot exceed --max-games')

    store = get_store()
    if reset:
        store.reset()

    users = generate_dummy_data(store, num_users, min_games, max_games)
    click.echo(
        f"Seeded {len(users)} users; store now holds "
        f"{len(store.users)} users and {len(store.games)} games.")


def register_commands(app):
    app.cli.add_command(seed_demo_command)
