"""Blog API Client — thin async httpx wrapper over the HTTP surface.

Invariants:
    - One method per endpoint; payloads are the JSON bodies as dicts
    - Any non-2xx response raises ApiRequestError carrying the envelope's message
    - No retries, no timeouts beyond httpx defaults
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class ApiRequestError(Exception):
    """Non-2xx response from the blog API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _error_message(response: httpx.Response) -> str:
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return response.reason_phrase or f"HTTP {response.status_code}"


class BlogApiClient:
    """Endpoint-per-method client; the caller owns the httpx.AsyncClient."""

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        response = await self.http.request(method, url, **kwargs)
        if response.is_error:
            raise ApiRequestError(response.status_code, _error_message(response))
        return response.json()

    # --- users ---------------------------------------------------------------

    async def list_users(self) -> list[dict]:
        return await self._request("GET", "/users/")

    async def get_user(self, user_id: str) -> dict:
        return await self._request("GET", f"/users/{user_id}")

    async def create_user(self, name: str, username: str, password: str) -> dict:
        return await self._request(
            "POST", "/users/",
            json={"name": name, "username": username, "password": password},
        )

    async def login(self, username: str, password: str) -> dict:
        return await self._request(
            "POST", "/users/login",
            json={"username": username, "password": password},
        )

    # --- blogs ---------------------------------------------------------------

    async def list_posts(self) -> list[dict]:
        return await self._request("GET", "/blogs/")

    async def list_feed(self) -> list[dict]:
        return await self._request("GET", "/blogs/feed")

    async def create_post(self, title: str, content: str, author: str) -> dict:
        return await self._request(
            "POST", "/blogs/",
            json={"title": title, "content": content, "author": author},
        )

    async def like_post(self, post_id: str) -> dict:
        return await self._request("PUT", f"/blogs/like/{post_id}")

    async def add_comment(self, post_id: str, content: str, user_id: str) -> dict:
        return await self._request(
            "POST", f"/blogs/{post_id}/comment",
            json={"content": content, "userId": user_id},
        )

    async def like_comment(self, post_id: str, index: int) -> dict:
        return await self._request("PUT", f"/blogs/{post_id}/comment/like/{index}")

    async def like_comment_by_id(self, post_id: str, comment_id: str) -> dict:
        return await self._request(
            "PUT", f"/blogs/{post_id}/comments/{comment_id}/like",
        )
