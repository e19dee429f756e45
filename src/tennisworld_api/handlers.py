"""
Route handlers for the TennisWorld API.

Each handler is a plain function from request data to a response payload so it
can be exercised without a running server. The FastAPI wiring lives in main.py.
"""

import time
import logging
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to TennisWorld API"

# Mock data, returned verbatim for every ranking type
MOCK_RANKINGS = [
    {"rank": 1, "name": "Player One", "points": 10000},
    {"rank": 2, "name": "Player Two", "points": 9500},
    {"rank": 3, "name": "Player Three", "points": 9000},
]


def welcome() -> Dict[str, Any]:
    """Root endpoint"""
    return {"message": WELCOME_MESSAGE}


def generate_user_id(clock: Optional[Callable[[], float]] = None) -> str:
    """
    Build a user id from the current time in milliseconds.

    Two registrations within the same millisecond get the same id; nothing
    here is persisted, so there is no counter to consult.
    """
    now = clock() if clock else time.time()
    return str(int(now * 1000))


def register_user(payload: Any, clock: Optional[Callable[[], float]] = None) -> Dict[str, Any]:
    """
    Mock user registration.

    Accepts any JSON body and echoes username/email back with a generated id.
    The password is accepted but never stored or checked.

    Args:
        payload: Parsed JSON body (anything that is not an object has no fields;
            username/email missing from it are omitted from the response)
        clock: Time source for id generation (time.time when omitted)

    Returns:
        Registration response payload
    """
    fields = payload if isinstance(payload, dict) else {}

    logger.info(f"Register request received: username={fields.get('username')!r}, email={fields.get('email')!r}")

    # Fields absent from the body are left out of the response, not sent as null
    user = {"id": generate_user_id(clock)}
    for key in ("username", "email"):
        if key in fields:
            user[key] = fields[key]

    return {
        "success": True,
        "message": "User registered successfully",
        "user": user,
    }


def get_rankings(ranking_type: str) -> Dict[str, Any]:
    """Mock rankings; the type is only echoed into the message."""
    return {
        "success": True,
        "message": f"{ranking_type} rankings retrieved",
        "data": {
            "rankings": [dict(entry) for entry in MOCK_RANKINGS],
        },
    }


def tennis_test() -> Dict[str, Any]:
    logger.info("Test route called")
    return {"message": "Test route works!"}
