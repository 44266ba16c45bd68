import json
import logging
import math

from candyboard.errors import NotFoundError, ValidationError
from candyboard.models import GameRecord, User
from candyboard.utils.stats import build_global_stats, build_leaderboard

logger = logging.getLogger(__name__)


def _is_number(value):
    # bool is an int subclass but is not a score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large to convert to float
        return False


def _require_username(username):
    if not isinstance(username, str) or username.strip() == '':
        raise ValidationError("Username cannot be empty")
    return username


class LeaderboardStore:
    """
    In-memory storage for users and game records.

    Both collections are append-only. Users and games share one id counter.
    """

    def __init__(self):
        self.users = []
        self.games = []
        self._next_id = 1

    def _allocate_id(self):
        new_id = self._next_id
        self._next_id += 1
        return new_id

    def find_user(self, username):
        for user in self.users:
            if user.username == username:
                return user
        return None

    def register(self, username):
        _require_username(username)

        if self.find_user(username):
            raise ValidationError("Username already exists")

        user = User(id=self._allocate_id(), username=username)
        self.users.append(user)
        logger.info(f"Registered user {username} with id {user.id}")
        return user

    def login(self, username):
        _require_username(username)

        user = self.find_user(username)
        if not user:
            raise NotFoundError("User not found")
        logger.debug(f"Login for user {username}")
        return user

    def list_users(self):
        return list(self.users)

    def submit_game(self, username, score, moves_used=None, duration=None):
        if not isinstance(username, str) or not username or not _is_number(score):
            raise ValidationError("Missing required fields")

        game = GameRecord(id=self._allocate_id(),
                          username=username,
                          score=score,
                          moves_used=moves_used or 0,
                          duration=duration or 0)
        self.games.append(game)
        logger.info(
            f"Recorded game {game.id} for {username}: score={score}, "
            f"moves={game.moves_used}, duration={game.duration}")
        return game

    def submit_game_file(self, username, payload):
        """Submit a game from an uploaded JSON document"""
        try:
            data = json.loads(payload)
        except (TypeError, ValueError, UnicodeDecodeError) as e:
            logger.warning(f"Rejected game upload for {username}: {e}")
            raise ValidationError("Invalid game data file")

        if not isinstance(data, dict):
            raise ValidationError("Invalid game data file")

        return self.submit_game(username, data.get('score'),
                                moves_used=data.get('moves_used'),
                                duration=data.get('duration'))

    def leaderboard(self):
        return build_leaderboard(self.games)

    def stats(self):
        return build_global_stats(self.users, self.games)

    def reset(self):
        self.users = []
        self.games = []
        self._next_id = 1
        logger.info("Leaderboard store cleared")
