import json
import logging
import os
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

import requests

from candyboard.client.storage import UserStorage

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000/api"


class ApiError(Exception):
    """A request to the leaderboard service did not produce a usable answer."""

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


class SessionError(ApiError):
    """Raised when a game action needs a logged-in user and a running session."""


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ApiClient:
    """Client for the candy game leaderboard service.

    - requests.Session() reused for every call
    - current user cached in memory and persisted through UserStorage
    - current game session kept in memory only
    - convenience methods return a {"success": False, "message": ...}
      envelope instead of raising, except complete_game and upload_game_data
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        storage: Optional[UserStorage] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 10,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.base_url = self.resolve_base_url(base_url)
        self.storage = storage or UserStorage()
        self.session = session or requests.Session()
        self.timeout = timeout
        self._sleep = sleep
        self.current_user: Optional[dict] = None
        self.current_session: Optional[dict] = None

    @staticmethod
    def resolve_base_url(base_url: Optional[str] = None) -> str:
        url = base_url or os.environ.get("CANDYBOARD_API_URL") or DEFAULT_BASE_URL
        return url.rstrip("/")

    # ----------------------------
    # Transport
    # ----------------------------
    def request(self, endpoint: str, method: str = "GET", json: Any = None, **kwargs) -> Any:
        """Send a request and return the decoded JSON body.

        Raises ApiError on transport failures, non-2xx statuses and bodies
        that are not JSON.
        """
        url = f"{self.base_url}{endpoint}"
        kwargs.setdefault("timeout", self.timeout)
        logger.debug(f"API request: {method} {url}")

        try:
            resp = self.session.request(method, url, json=json, **kwargs)
        except requests.RequestException as e:
            logger.error(f"API request failed: {method} {url}: {e}")
            raise ApiError(f"Request failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            logger.error(f"Malformed response from {method} {url} (HTTP {resp.status_code})")
            raise ApiError(f"Malformed response (HTTP {resp.status_code})",
                           status_code=resp.status_code) from e

        if not resp.ok:
            message = None
            if isinstance(data, dict):
                message = data.get("message") or data.get("error")
            message = message or f"HTTP {resp.status_code}"
            logger.error(f"API request failed: {method} {url}: {message}")
            raise ApiError(message, status_code=resp.status_code, payload=data)

        logger.debug(f"API response: {data}")
        return data

    def _failure(self, action: str, error: ApiError) -> Dict[str, Any]:
        logger.error(f"{action} failed: {error.message}")
        return {"success": False, "message": error.message}

    # ----------------------------
    # Endpoints
    # ----------------------------
    def health_check(self) -> Dict[str, Any]:
        try:
            return self.request("/health")
        except ApiError as e:
            return self._failure("Health check", e)

    def register(self, username: str) -> Dict[str, Any]:
        try:
            response = self.request("/users/register", "POST", json={"username": username})
        except ApiError as e:
            return self._failure("Registration", e)

        if response.get("success"):
            self._remember_user(response["data"])
        return response

    def login(self, username: str) -> Dict[str, Any]:
        try:
            response = self.request("/users/login", "POST", json={"username": username})
        except ApiError as e:
            return self._failure("Login", e)

        if response.get("success"):
            self._remember_user(response["data"])
        return response

    def list_users(self) -> Dict[str, Any]:
        try:
            return self.request("/users")
        except ApiError as e:
            return self._failure("Listing users", e)

    def save_game_record(self, game_data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            return self.request("/games", "POST", json=game_data)
        except ApiError as e:
            return self._failure("Saving game record", e)

    def get_leaderboard(self) -> Dict[str, Any]:
        try:
            return self.request("/leaderboard")
        except ApiError as e:
            return self._failure("Fetching leaderboard", e)

    def get_stats(self) -> Dict[str, Any]:
        try:
            return self.request("/stats")
        except ApiError as e:
            return self._failure("Fetching stats", e)

    def check_connection(self) -> bool:
        response = self.health_check()
        return response.get("status") == "ok"

    # ----------------------------
    # Retry and batch helpers
    # ----------------------------
    def request_with_retry(self, endpoint: str, method: str = "GET", json: Any = None,
                           max_retries: int = 3, **kwargs) -> Any:
        """Call request() up to max_retries times, sleeping `attempt` seconds between failures."""
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")

        last_error = None
        for attempt in range(1, max_retries + 1):
            try:
                return self.request(endpoint, method, json=json, **kwargs)
            except ApiError as e:
                last_error = e
                logger.warning(f"Request failed, retrying ({attempt}/{max_retries}): {e.message}")
                if attempt < max_retries:
                    # linear backoff: 1s, 2s, 3s...
                    self._sleep(attempt)

        raise last_error

    def batch_request(self, batch: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Run requests one after another; a failing item does not stop the rest.

        Each item is {"endpoint": "/stats", "options": {"method": ..., "json": ...}}.
        """
        results = []
        for item in batch:
            options = item.get("options") or {}
            try:
                result = self.request(item["endpoint"], **options)
                results.append({"success": True, "data": result})
            except ApiError as e:
                results.append({"success": False, "error": e.message})
        return results

    # ----------------------------
    # Local user state
    # ----------------------------
    def _remember_user(self, user: dict) -> None:
        self.current_user = user
        self.save_user_to_storage(user)
        logger.info(f"Current user set to {user.get('username')}")

    def save_user_to_storage(self, user: dict) -> bool:
        return self.storage.save(user)

    def load_user_from_storage(self) -> Optional[dict]:
        user = self.storage.load()
        if user:
            self.current_user = user
            logger.info(f"Loaded user {user.get('username')} from local storage")
        return user

    def clear_user_from_storage(self) -> None:
        self.storage.clear()
        self.current_user = None

    def get_current_user(self) -> Optional[dict]:
        return self.current_user or self.load_user_from_storage()

    def is_logged_in(self) -> bool:
        return bool(self.get_current_user())

    def logout(self) -> None:
        self.clear_user_from_storage()
        self.current_session = None

    # ----------------------------
    # Game session
    # ----------------------------
    def start_game_session(self, robot_type: Optional[str] = None) -> Dict[str, Any]:
        user = self.get_current_user()
        if not user:
            logger.warning("Cannot start a game session without a logged-in user")
            return {"success": False, "message": "No logged-in user"}

        self.current_session = {
            "session_id": str(uuid.uuid4()),
            "username": user["username"],
            "robot_type": robot_type,
            "created_at": _now_iso(),
            "events": [],
        }
        logger.info(f"Game session {self.current_session['session_id']} started")
        return {"success": True, "data": self.current_session}

    def record_game_event(self, event_type: str, event_data: Optional[dict] = None) -> Optional[dict]:
        if not self.current_session:
            logger.warning("No active game session, skipping event")
            return None

        event = {"event_type": event_type, "event_data": event_data or {}, "timestamp": _now_iso()}
        self.current_session["events"].append(event)
        return event

    def _require_session(self) -> dict:
        user = self.get_current_user()
        if not self.current_session or not user:
            raise SessionError("Missing game session or user information")
        return user

    def complete_game(self, score: float, moves_used: int = 0, duration: float = 0) -> Dict[str, Any]:
        """Submit the running session's result. Raises instead of returning a failure envelope."""
        user = self._require_session()
        try:
            response = self.request("/games", "POST", json={
                "username": user["username"],
                "score": score,
                "moves_used": moves_used,
                "duration": duration,
            })
        except ApiError as e:
            logger.error(f"Saving game data failed: {e.message}")
            raise

        if response.get("success"):
            logger.info("Game data saved")
            self.current_session = None
        return response

    def upload_game_data(self, game_data: Any, filename: str = "game-data.json") -> Dict[str, Any]:
        """Upload a JSON game data file for the running session."""
        user = self._require_session()
        if isinstance(game_data, (dict, list)):
            game_data = json.dumps(game_data)

        files = {"gameData": (filename, game_data, "application/json")}
        form = {
            "username": user["username"],
            "session_id": self.current_session["session_id"],
        }
        try:
            return self.request("/games/upload", "POST", files=files, data=form)
        except ApiError as e:
            logger.error(f"Uploading game data failed: {e.message}")
            raise

    # ----------------------------
    # Misc
    # ----------------------------
    @staticmethod
    def format_error(error: Any) -> str:
        if isinstance(error, str):
            return error
        message = getattr(error, "message", None) or (str(error) if error else "")
        return message or "Unknown error"

    def get_status(self) -> Dict[str, Any]:
        return {
            "base_url": self.base_url,
            "current_user": self.current_user,
            "is_logged_in": self.is_logged_in(),
            "timestamp": _now_iso(),
        }
