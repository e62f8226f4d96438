# app/web/view.py
"""
View-model for the users page.

Mirrors the browser page served at "/": one fetch per mount, and exactly one
of three states (loading, error, loaded) at any time.
"""

import html
import json
import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

USERS_PATH = "/api/users"
FETCH_ERROR = "Failed to fetch users"
FALLBACK_ERROR = "An error occurred"


class UsersView:
    def __init__(self, client: httpx.AsyncClient):
        self.client = client
        self.users: List[Dict[str, Any]] = []
        self.loading = True
        self.error: Optional[str] = None
        self._mounted = False

    @property
    def state(self) -> str:
        if self.loading:
            return "loading"
        if self.error is not None:
            return "error"
        return "loaded"

    async def mount(self) -> None:
        """
        Fetch the users once. Later calls on the same view do nothing.
        """
        if self._mounted:
            return
        self._mounted = True

        try:
            response = await self.client.get(USERS_PATH)
            if not response.is_success:
                raise RuntimeError(FETCH_ERROR)
            self.users = response.json()
        except Exception as exc:
            self.error = str(exc) or FALLBACK_ERROR
            logger.debug("users fetch failed: %r", exc)
        finally:
            self.loading = False

    def render(self) -> str:
        if self.loading:
            return "<div>Loading...</div>"
        if self.error is not None:
            return f"<div>Error: {html.escape(self.error)}</div>"
        return f"<div><h1>Users</h1>{html.escape(json.dumps(self.users))}</div>"
