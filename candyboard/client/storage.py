import json
import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_PATH = Path.home() / ".candyboard" / "user.json"


class UserStorage:
    """Keeps the logged-in user between runs in a small JSON file.

    Failures are logged and never raised, a broken cache only means the
    player has to log in again.
    """

    def __init__(self, path: Optional[str] = None):
        if path is None:
            path = os.environ.get("CANDYBOARD_USER_FILE", DEFAULT_STORAGE_PATH)
        self.path = Path(path)

    def save(self, user: dict) -> bool:
        try:
            self.path.parent.mkdir(exist_ok=True, parents=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(user, f, ensure_ascii=False)
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.warning(f"Could not save user to {self.path}: {e}")
            return False

    def load(self) -> Optional[dict]:
        if not self.path.exists():
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                user = json.load(f)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Could not load user from {self.path}: {e}")
            return None
        return user if isinstance(user, dict) else None

    def clear(self) -> bool:
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Could not clear stored user at {self.path}: {e}")
            return False
        return True
