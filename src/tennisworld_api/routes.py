"""
API Routes for users and tennis data

Thin FastAPI adapters around the functions in handlers.py.
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from . import handlers

logger = logging.getLogger(__name__)


def _is_json_content_type(content_type: str) -> bool:
    media_type = content_type.split(";")[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def read_json_body(request: Request) -> Any:
    """
    Parse the request body as JSON.

    Bodies that are empty or not declared as JSON parse to an empty object.
    A malformed JSON body raises json.JSONDecodeError, which is left for the
    framework to turn into a generic 500.
    """
    if not _is_json_content_type(request.headers.get("content-type", "")):
        return {}

    body = await request.body()
    if not body.strip():
        return {}

    return json.loads(body)


def create_api_router() -> APIRouter:
    """
    Create FastAPI router for user and tennis endpoints.

    Returns:
        APIRouter with registration, rankings and test endpoints
    """
    router = APIRouter(prefix="/api")

    # ============ USERS ============

    @router.post("/users/register", status_code=201, tags=["users"])
    async def register_user(payload: Any = Depends(read_json_body)):
        """
        Mock user registration.

        Request:
            - username, email, password (any JSON values, nothing is validated)

        Returns:
            Echoed username/email with a timestamp-derived id
        """
        return handlers.register_user(payload)

    # ============ TENNIS ============

    @router.get("/tennis/test", tags=["tennis"])
    async def tennis_test():
        return handlers.tennis_test()

    # path convertor: the type may be empty or contain a decoded "/"
    @router.get("/tennis/rankings/{ranking_type:path}", tags=["tennis"])
    async def get_rankings(ranking_type: str):
        """Return the mock rankings list; ranking_type is echoed, never used to filter"""
        return handlers.get_rankings(ranking_type)

    return router
