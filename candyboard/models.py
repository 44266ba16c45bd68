from datetime import datetime, timezone


def utc_timestamp():
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-01T08:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class User:
    def __init__(self, id, username, created_at=None):
        self.id = id
        self.username = username
        self.created_at = created_at or utc_timestamp()

    def to_dict(self):
        return {
            "id": self.id,
            "username": self.username,
            "created_at": self.created_at
        }

    def __repr__(self):
        return f"<User {self.id} {self.username!r}>"


class GameRecord:
    def __init__(self, id, username, score, moves_used=0, duration=0,
                 created_at=None):
        self.id = id
        self.username = username
        self.score = score
        self.moves_used = moves_used
        self.duration = duration  # Time in seconds
        self.created_at = created_at or utc_timestamp()

    def to_dict(self):
        return {
            "id": self.id,
            "username": self.username,
            "score": self.score,
            "moves_used": self.moves_used,
            "duration": self.duration,
            "created_at": self.created_at
        }

    def __repr__(self):
        return f"<GameRecord {self.id} {self.username!r} score={self.score}>"
