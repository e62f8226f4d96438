# scripts/show_users.py
"""
Mount the users view against a running server and print what it renders.

Usage:
    uvicorn app:app          # in another terminal
    python -m scripts.show_users
"""

import asyncio
import logging
import os

import httpx

from app.web.view import UsersView

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

API_URL = os.environ.get("USERS_API_URL", "http://127.0.0.1:8000")


async def run(base_url: str = API_URL) -> UsersView:
    async with httpx.AsyncClient(base_url=base_url) as client:
        view = UsersView(client)
        await view.mount()
    return view


def main():
    view = asyncio.run(run())
    logger.info("View state: %s", view.state)
    print(view.render())


if __name__ == "__main__":
    main()
