"""Torre.ai HTTP client with error handling."""

import json
import logging
from typing import Any

import httpx

from config import settings

logger = logging.getLogger(__name__)

BROWSER_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:140.0) Gecko/20100101 Firefox/140.0"


class UpstreamError(Exception):
    """Torre.ai answered with a non-200 status or an unreadable body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProfileNotFoundError(UpstreamError):
    pass


class TorreClient:
    """Thin async wrapper around the Torre.ai endpoints this service proxies.

    ``search_people`` backs the distribution pipeline and never raises.
    The pass-through calls raise ``UpstreamError`` for the routes to map.
    """

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ) -> None:
        self._transport = transport
        self._timeout = timeout if timeout is not None else settings.request_timeout_seconds

    def _http(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    def _json_headers(self) -> dict[str, str]:
        return {"Content-Type": "application/json", "User-Agent": settings.user_agent}

    async def search_people(self, term: str, limit: int, offset: int = 0) -> list[dict[str, Any]]:
        """Return the raw ``results`` array for one search, or [] on any failure."""
        payload = {
            "query": {"term": term, "type": "text"},
            "identityType": "person",
            "limit": limit,
            "offset": offset,
            "meta": True,
            "excluding": [],
            "excludedPeople": [],
            "excludeContacts": False,
            "strictMode": False,
        }
        logger.debug("Searching '%s' with offset %d and limit %d", term, offset, limit)

        try:
            async with self._http() as client:
                resp = await client.post(
                    settings.torre_search_url, json=payload, headers=self._json_headers()
                )
            if resp.status_code != 200:
                logger.warning("Search '%s' returned status %d", term, resp.status_code)
                return []
            results = resp.json().get("results")
        except httpx.HTTPError as e:
            logger.warning("Search failed for '%s': %s", term, e)
            return []
        except (ValueError, AttributeError) as e:
            logger.warning("Unreadable search response for '%s': %s", term, e)
            return []

        if not isinstance(results, list):
            return []
        return [r for r in results if isinstance(r, dict)]

    async def search_stream(self, query: str, limit: int) -> list[dict[str, Any]]:
        """Query the newline-delimited streaming search and return one dict per line."""
        payload = {
            "query": query,
            "identityType": "person",
            "limit": limit,
            "meta": True,
            "excluding": [],
            "excludedPeople": [],
            "excludeContacts": False,
        }
        rows: list[dict[str, Any]] = []

        try:
            async with self._http() as client:
                async with client.stream(
                    "POST",
                    settings.torre_search_stream_url,
                    json=payload,
                    headers=self._json_headers(),
                ) as resp:
                    if resp.status_code != 200:
                        body = (await resp.aread()).decode("utf-8", errors="replace")
                        logger.error(
                            "Torre search stream returned %d - %s", resp.status_code, body
                        )
                        raise UpstreamError(
                            f"Torre API returned error: {resp.status_code} - {body}",
                            status_code=resp.status_code,
                        )
                    line_number = 0
                    async for line in resp.aiter_lines():
                        line_number += 1
                        if not line.strip():
                            continue
                        try:
                            node = json.loads(line)
                        except json.JSONDecodeError as e:
                            logger.error("Error parsing JSON line %d: %s - %s", line_number, line, e)
                            continue
                        if isinstance(node, dict):
                            rows.append(node)
        except httpx.HTTPError as e:
            logger.error("Torre search stream request failed: %s", e)
            raise UpstreamError(f"HTTP request failed: {e}") from e

        return rows

    async def analyze(self, payload: dict[str, Any]) -> dict[str, Any]:
        """POST an analysis request and return the decoded body."""
        try:
            async with self._http() as client:
                resp = await client.post(
                    settings.torre_analyze_url, json=payload, headers=self._json_headers()
                )
        except httpx.HTTPError as e:
            logger.error("Torre analysis request failed: %s", e)
            raise UpstreamError(f"HTTP request failed: {e}") from e

        logger.debug("Received analysis response status: %d", resp.status_code)
        if resp.status_code != 200:
            raise UpstreamError(
                f"Torre.ai API returned status: {resp.status_code}", status_code=resp.status_code
            )
        try:
            body = resp.json()
        except ValueError as e:
            raise UpstreamError(f"Failed to parse Torre.ai analysis response: {e}") from e
        if not isinstance(body, dict):
            raise UpstreamError("Torre.ai analysis response is not a JSON object")
        return body

    async def fetch_bio(self, username: str) -> dict[str, Any]:
        """GET the genome bio for ``username``."""
        headers = {
            "Content-Type": "application/json",
            "User-Agent": BROWSER_USER_AGENT,
            "Accept": "application/json, text/plain, */*",
            "Accept-Language": "en-US,en;q=0.9",
        }
        try:
            async with self._http() as client:
                resp = await client.get(settings.torre_bios_url + username, headers=headers)
        except httpx.HTTPError as e:
            logger.error("HTTP request failed for Torre.ai profile '%s': %s", username, e)
            raise UpstreamError(f"HTTP request failed for profile '{username}': {e}") from e

        logger.debug("Torre.ai profile API response status: %d", resp.status_code)
        if resp.status_code == 404:
            raise ProfileNotFoundError(f"Profile '{username}' not found", status_code=404)
        if resp.status_code != 200:
            message = (
                f"Torre.ai profile API returned status {resp.status_code} "
                f"for username '{username}': {resp.text}"
            )
            logger.error(message)
            raise UpstreamError(message, status_code=resp.status_code)
        try:
            body = resp.json()
        except ValueError as e:
            logger.error("Failed to parse Torre.ai profile response for '%s': %s", username, e)
            raise UpstreamError(f"Failed to parse profile response for '{username}'") from e
        if not isinstance(body, dict):
            raise UpstreamError(f"Unexpected profile payload for '{username}'")
        return body


_client: TorreClient | None = None


def get_client() -> TorreClient:
    global _client
    if _client is None:
        _client = TorreClient()
    return _client
