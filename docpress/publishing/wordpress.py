"""Async client for the WordPress REST API (posts, categories, tags)."""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from docpress.models.schemas import WordPressPost
from docpress.publishing.config import WordPressConfig

logger = logging.getLogger(__name__)


class WordPressError(Exception):
    """Raised when the WordPress API returns an error response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class WordPressClient:
    """Thin async wrapper over the ``wp/v2`` endpoints.

    Use as an async context manager so the underlying connection pool is
    closed.
    """

    def __init__(
        self,
        config: WordPressConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: WordPress site and credentials.
            transport: Optional httpx transport, used by tests.
        """
        self._config = config
        self._client = httpx.AsyncClient(
            base_url=config.api_base,
            auth=(config.username, config.app_password),
            timeout=config.timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "WordPressClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise WordPressError(f"WordPress request failed: {e}") from e

        if response.is_error:
            raise WordPressError(
                f"WordPress API error: {response.status_code} - {response.text}",
                status_code=response.status_code,
            )
        return response.json()

    async def create_post(self, post: WordPressPost) -> dict[str, Any]:
        """Create a post and return the API's post object."""
        result = await self._request(
            "POST", "/posts", json=post.model_dump(mode="json", exclude_none=True)
        )
        logger.info(f"Created WordPress post {result.get('id')}")
        return result

    async def update_post(self, post_id: int, post: WordPressPost) -> dict[str, Any]:
        """Update an existing post and return the API's post object."""
        result = await self._request(
            "PUT", f"/posts/{post_id}", json=post.model_dump(mode="json", exclude_none=True)
        )
        logger.info(f"Updated WordPress post {post_id}")
        return result

    async def upload_media(self, content: bytes, filename: str, mime_type: str) -> dict[str, Any]:
        """Upload a file to the media library and return the media object.

        The raw bytes are the request body; WordPress takes the file name
        from the Content-Disposition header.
        """
        result = await self._request(
            "POST",
            "/media",
            content=content,
            headers={
                "Content-Type": mime_type,
                "Content-Disposition": f'attachment; filename="{quote(filename)}"',
            },
        )
        logger.info(f"Uploaded media {filename} as {result.get('id')}")
        return result

    async def test_connection(self) -> dict[str, Any]:
        """Check the credentials by fetching the authenticated user."""
        return await self._request("GET", "/users/me")

    async def get_categories(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/categories", params={"per_page": 100})

    async def create_category(self, name: str) -> dict[str, Any]:
        return await self._request("POST", "/categories", json={"name": name})

    async def get_tags(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/tags", params={"per_page": 100})

    async def create_tag(self, name: str) -> dict[str, Any]:
        return await self._request("POST", "/tags", json={"name": name})

    async def get_or_create_category(self, name: str) -> int:
        """Return the ID of the category named ``name``, creating it if needed.

        Names are compared case-insensitively.
        """
        for category in await self.get_categories():
            if category["name"].lower() == name.lower():
                return category["id"]

        created = await self.create_category(name)
        logger.info(f"Created WordPress category {name!r}")
        return created["id"]

    async def get_or_create_tags(self, names: list[str]) -> list[int]:
        """Return tag IDs for ``names`` in order, creating missing tags."""
        existing = {tag["name"].lower(): tag["id"] for tag in await self.get_tags()}
        tag_ids: list[int] = []

        for name in names:
            tag_id = existing.get(name.lower())
            if tag_id is None:
                tag_id = (await self.create_tag(name))["id"]
                existing[name.lower()] = tag_id
            tag_ids.append(tag_id)

        return tag_ids
