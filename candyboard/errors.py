class LeaderboardError(Exception):
    """Base error for store operations, carries the HTTP status to return"""
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"success": False, "message": self.message}


class ValidationError(LeaderboardError):
    status_code = 400


class NotFoundError(LeaderboardError):
    status_code = 404
