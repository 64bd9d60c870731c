import os
import secrets
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# 1. THE KEY (shared by every client allowed to post, edit or delete jobs)
API_KEY = os.getenv("API_KEY")


def get_api_key() -> Optional[str]:
    """Configured shared secret, or None when the server has none."""
    return API_KEY


def verify_api_key(provided: Optional[str], expected: Optional[str]) -> bool:
    """Verbatim comparison of the Authorization header against the secret."""
    if not provided or not expected:
        return False
    return secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))
