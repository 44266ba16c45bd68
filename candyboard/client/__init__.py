from candyboard.client.api_client import ApiClient, ApiError, SessionError
from candyboard.client.storage import UserStorage

__all__ = ["ApiClient", "ApiError", "SessionError", "UserStorage"]
