import random
import logging

from candyboard.errors import ValidationError

logger = logging.getLogger(__name__)


def generate_username():
    """Generate a random username"""
    adjectives = [
        "Happy", "Sweet", "Quick", "Sour", "Brave", "Sugar", "Fizzy", "Lucky",
        "Swift", "Bold", "Bright", "Sticky", "Chewy", "Witty", "Crunchy"
    ]
    nouns = [
        "Player", "Gummy", "Champion", "Lollipop", "Toffee", "Caramel",
        "Jelly", "Truffle", "Wizard", "Drop", "Bonbon", "Fudge"
    ]
    return f"{random.choice(adjectives)}{random.choice(nouns)}{random.randint(1, 999)}"


def generate_game(username):
    """Random but plausible result for a single level"""
    moves_used = random.randint(5, 40)
    return {
        "username": username,
        "score": random.randint(0, 200) * 10,
        "moves_used": moves_used,
        "duration": moves_used * random.randint(2, 8)
    }


def generate_dummy_data(store, num_users=10, min_games=1, max_games=10):
    """
    Register random users and submit random games for each of them.

    Returns:
        list[User]: the users that were created
    """
    created = []
    attempts = 0
    while len(created) < num_users and attempts < num_users * 10:
        attempts += 1
        try:
            user = store.register(generate_username())
        except ValidationError:
            # Name collision, try another
            continue
        created.append(user)

        for _ in range(random.randint(min_games, max_games)):
            game = generate_game(user.username)
            store.submit_game(game["username"], game["score"],
                              moves_used=game["moves_used"],
                              duration=game["duration"])

    logger.info(f"Generated dummy data for {len(created)} users")
    return created
