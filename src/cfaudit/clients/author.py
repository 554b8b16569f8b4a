"""
Client for the author environment's content fragments API.

Answers two questions for the resolution rules: does content exist at a
path, and what lives next to it. Everything the client learns is cached in
the run's PathIndex so later lookups (and the post-processing pass) can use
it without another round trip.
"""

from __future__ import annotations

import time
from typing import Any
from urllib.parse import urlencode

import requests

from cfaudit.core.context import AuditContext
from cfaudit.core.errors import AuthorAuthError, AuthorClientError, ConfigError
from cfaudit.domain.content_path import ContentPath
from cfaudit.domain.locale import Locale
from cfaudit.domain.path_index import PathIndex
from cfaudit.paths.utils import DAM_PREFIX, get_parent_path


class AuthorClient:
    """Read-only client for /adobe/sites/cf/fragments on an author host."""

    API_SITES_BASE = "/adobe/sites"
    API_SITES_FRAGMENTS = API_SITES_BASE + "/cf/fragments"

    # Retry config for 429 rate-limit responses
    MAX_RETRIES = 3
    RETRY_BACKOFF_BASE = 2.0  # seconds; doubles each retry

    def __init__(
        self,
        context: AuditContext,
        author_url: str,
        auth_token: str,
        path_index: PathIndex | None = None,
    ):
        """Initialize the client.

        Args:
            context: Run context (logger and settings)
            author_url: Base URL of the author environment
            auth_token: Bearer token for the fragments API
            path_index: Index to cache fetched content into
        """
        self.context = context
        self.author_url = author_url
        self.auth_token = auth_token
        self.path_index = path_index
        self._session = requests.Session()
        self._session.headers.update(self.auth_headers())

    @classmethod
    def create_from(
        cls, context: AuditContext, path_index: PathIndex | None = None
    ) -> AuthorClient:
        """Build a client from the run's configuration.

        Raises:
            ConfigError: If the author URL or token is not configured.
        """
        config = context.config
        if not config.author_url:
            raise ConfigError("AEM_AUTHOR_URL is required to query the author environment")
        if not config.author_token:
            raise ConfigError("AEM_AUTHOR_TOKEN is required to query the author environment")
        return cls(context, config.author_url, config.author_token, path_index)

    @staticmethod
    def is_breaking_point(path: str | None) -> bool:
        """True at or above /content/dam, where hierarchy traversal stops."""
        return not path or not path.startswith(DAM_PREFIX)

    def auth_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.auth_token}",
            "Accept": "application/json",
        }

    def create_url(self, path: str, cursor: str | None = None) -> str:
        params = {"path": path, "projection": "minimal"}
        if cursor:
            params["cursor"] = cursor
        base = self.author_url.rstrip("/")
        return f"{base}{self.API_SITES_FRAGMENTS}?{urlencode(params)}"

    def _request(self, url: str) -> requests.Response:
        """GET ``url``, retrying on 429 with exponential backoff.

        Raises:
            AuthorClientError: On connection errors and timeouts
        """
        timeout = self.context.config.request_timeout

        for attempt in range(1 + self.MAX_RETRIES):
            try:
                response = self._session.request("GET", url, timeout=timeout)
            except requests.RequestException as e:
                raise AuthorClientError(f"Request failed: {e}") from e

            if response.status_code == 429 and attempt < self.MAX_RETRIES:
                retry_after = response.headers.get("Retry-After")
                try:
                    wait = float(retry_after) if retry_after else None
                except ValueError:
                    wait = None
                if wait is None:
                    wait = self.RETRY_BACKOFF_BASE * (2 ** attempt)
                self.context.log.warning(
                    "Rate limited by author, retrying in %.0fs (attempt %d/%d)",
                    wait, attempt + 1, self.MAX_RETRIES,
                )
                time.sleep(wait)
                continue

            break  # Not a 429, or exhausted retries

        if response.status_code in (401, 403):
            raise AuthorAuthError(
                "Author environment rejected the token",
                status_code=response.status_code,
            )

        return response

    def _read_items(self, response: requests.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise AuthorClientError(
                f"Invalid JSON from author: {e}", status_code=response.status_code
            ) from e
        if not isinstance(data, dict):
            return {"items": [], "cursor": None}
        return {"items": data.get("items") or [], "cursor": data.get("cursor")}

    def is_available(self, path: str) -> bool:
        """Check whether the author environment knows ``path``.

        A path is available when the fragments listing for it is non-empty.
        Returned items are cached in the path index.

        Raises:
            AuthorClientError: If the request itself fails
        """
        response = self._request(self.create_url(path))
        if not response.ok:
            self.context.log.debug("Author returned %s for %s", response.status_code, path)
            return False

        items = self._read_items(response)["items"]
        self._cache_items(items)
        return len(items) > 0

    def fetch_with_pagination(self, path: str, cursor: str | None = None) -> dict[str, Any]:
        """Fetch one page of items under ``path``.

        Returns:
            Dict with ``items`` and the ``cursor`` of the next page (or None)

        Raises:
            AuthorClientError: On request failures and non-OK responses
        """
        response = self._request(self.create_url(path, cursor))
        if not response.ok:
            raise AuthorClientError(
                f"Author API error ({response.status_code}) for {path}",
                status_code=response.status_code,
            )
        return self._read_items(response)

    def fetch_content_with_pagination(self, path: str) -> list[dict[str, Any]]:
        """Fetch every page under ``path`` up to ``max_pages``.

        A failure part-way through keeps the items fetched so far.
        """
        config = self.context.config
        all_items: list[dict[str, Any]] = []
        cursor = None

        for page in range(config.max_pages):
            if page > 0 and config.pagination_delay:
                time.sleep(config.pagination_delay)
            try:
                result = self.fetch_with_pagination(path, cursor)
            except AuthorClientError as e:
                self.context.log.warning(
                    "Stopped paging %s after %d page(s): %s", path, page, e
                )
                break

            items = result["items"]
            all_items.extend(items)
            self._cache_items(items)

            cursor = result["cursor"]
            if not cursor:
                break

        return all_items

    def fetch_content(self, path: str) -> list[dict[str, Any]]:
        try:
            return self.fetch_content_with_pagination(path)
        except Exception as e:
            raise AuthorClientError(
                f"Failed to fetch AEM Author content for {path}: {e}"
            ) from e

    def get_children_from_path(self, parent_path: str) -> list[ContentPath]:
        """Return known children of ``parent_path``.

        Uses the cache first. Otherwise fetches the folder from the author
        environment if it exists there, or walks up to the nearest ancestor
        that does. Stops at /content/dam.
        """
        if self.path_index is None or self.is_breaking_point(parent_path):
            return []

        cached = self.path_index.find_children(parent_path)
        if cached:
            return cached

        try:
            if self.is_available(parent_path):
                try:
                    self.fetch_content(parent_path)
                except AuthorClientError as e:
                    self.context.log.warning("Using cached children of %s: %s", parent_path, e)
                return self.path_index.find_children(parent_path)
        except AuthorClientError as e:
            self.context.log.error("Could not check %s on author: %s", parent_path, e)
            return []

        grandparent = get_parent_path(parent_path)
        if grandparent is None:
            return []
        return self.get_children_from_path(grandparent)

    def _cache_items(self, items: list[dict[str, Any]]) -> None:
        if self.path_index is None:
            return
        for item in items:
            path = item.get("path") if isinstance(item, dict) else None
            if not path:
                continue
            locale = Locale.from_path(path)
            self.path_index.insert_content_path(
                path,
                item.get("status"),
                locale=locale.code if locale else None,
            )
