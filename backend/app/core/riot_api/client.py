"""Riot API HTTP client with error mapping, retry on bad gateway, and authentication."""

import asyncio
from typing import Optional, Union

import httpx
import structlog

from app.core.config import get_global_settings
from .constants import Platform, Region, RETRYABLE_STATUS_CODE
from .endpoints import RiotAPIEndpoints
from .errors import (
    AuthenticationError,
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    RiotAPIError,
    ServiceUnavailableError,
)

logger = structlog.get_logger(__name__)

MAX_MATCH_IDS_PER_REQUEST = 100


class RiotAPIClient:
    """Riot API client returning raw response bodies.

    Callers decode the JSON text themselves; the client only knows about
    URLs, authentication, status codes and the retry policy.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        region: Optional[Region] = None,
        platform: Optional[Platform] = None,
        max_attempts: Optional[int] = None,
        retry_backoff: Optional[float] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize Riot API client.

        Args:
            api_key: Riot API key (uses config if None)
            region: Default region for regional endpoints
            platform: Default platform for platform endpoints
            max_attempts: Total attempts for a request answered with 502
            retry_backoff: Fixed delay in seconds between those attempts
            timeout: Request timeout in seconds
            http_client: Pre-built httpx client; the caller keeps ownership
        """
        settings = get_global_settings()
        self.api_key = api_key if api_key is not None else settings.riot_api_key
        self.region = region or Region(settings.riot_region.lower())
        self.platform = platform or Platform(settings.riot_platform.lower())
        self.max_attempts = max_attempts or settings.riot_retry_attempts
        self.retry_backoff = (
            retry_backoff
            if retry_backoff is not None
            else settings.riot_retry_backoff_seconds
        )
        self.timeout = timeout or settings.riot_request_timeout

        self.endpoints = RiotAPIEndpoints(self.region, self.platform)

        # HTTP session
        self.session: Optional[httpx.AsyncClient] = http_client
        self._owns_session = http_client is None
        self._session_lock = asyncio.Lock()

    async def __aenter__(self):
        """Async context manager entry."""
        await self.start_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def start_session(self) -> None:
        """Start the httpx session."""
        if self.session is None or self.session.is_closed:
            async with self._session_lock:
                if self.session is None or self.session.is_closed:
                    self.session = httpx.AsyncClient(
                        headers={
                            "X-Riot-Token": self.api_key,
                            "Accept": "application/json",
                            "User-Agent": "MatchSummaryBackend/1.0",
                        },
                        timeout=httpx.Timeout(self.timeout),
                    )
                    self._owns_session = True

                    logger.info(
                        "Riot API client session started",
                        region=self._enum_str(self.region),
                        platform=self._enum_str(self.platform),
                        api_key_prefix="[REDACTED]" if self.api_key else "None",
                    )

    async def close(self) -> None:
        """Close the httpx session if this client created it."""
        if self._owns_session and self.session and not self.session.is_closed:
            await self.session.aclose()
            logger.info("Riot API client session closed")

    def _raise_for_status(self, response: httpx.Response, url: str) -> None:
        """Raise specific RiotAPIError subclass for a non-success response."""
        status = response.status_code
        if 200 <= status < 300:
            return

        error_kwargs = {
            "status_code": status,
            "response_text": response.text,
            "url": url,
        }
        if status == 400:
            raise BadRequestError("Invalid request parameters", **error_kwargs)
        elif status == 401:
            raise AuthenticationError("Invalid API key", **error_kwargs)
        elif status == 403:
            raise ForbiddenError("Access forbidden", **error_kwargs)
        elif status == 404:
            raise NotFoundError("Resource not found", **error_kwargs)
        elif status == 429:
            raise RateLimitError(
                "Rate limit exceeded",
                retry_after=float(response.headers.get("Retry-After", 1)),
                **error_kwargs,
            )
        elif status == 503:
            raise ServiceUnavailableError("Service unavailable", **error_kwargs)
        raise RiotAPIError(f"Upstream error {status}", **error_kwargs)

    async def _get(self, url: str) -> str:
        """
        Perform a GET request and return the response body.

        A 502 answer is retried with a fixed backoff until ``max_attempts``
        is reached; every other failure is raised immediately.

        Raises:
            RiotAPIError: For API and transport errors
        """
        await self.start_session()
        if self.session is None:
            raise RiotAPIError("Session not initialized")

        headers = {"X-Riot-Token": self.api_key} if self.api_key else {}

        for attempt in range(1, self.max_attempts + 1):
            try:
                response = await self.session.get(url, headers=headers)
            except httpx.RequestError as e:
                logger.warning("Riot API request failed", url=url, error=str(e))
                raise RiotAPIError(f"Request failed: {e}", url=url) from e

            if (
                response.status_code == RETRYABLE_STATUS_CODE
                and attempt < self.max_attempts
            ):
                logger.warning(
                    "Bad gateway from Riot API, retrying",
                    url=url,
                    attempt=attempt,
                    max_attempts=self.max_attempts,
                )
                await asyncio.sleep(self.retry_backoff)
                continue

            self._raise_for_status(response, url)
            return response.text

        # Unreachable while max_attempts >= 1
        raise RiotAPIError(f"Failed to fetch {url} after {self.max_attempts} attempts")

    @staticmethod
    def _enum_str(value: Union[Region, Platform, str]) -> str:
        """Extract string value from enum or return as-is."""
        return value.value if hasattr(value, "value") else value

    @staticmethod
    def _require(value: Optional[str], name: str) -> None:
        if value is None or not value.strip():
            raise ValueError(f"{name} cannot be empty")

    # Account endpoints
    async def fetch_account_by_riot_id(self, game_name: str, tag_line: str) -> str:
        """Get account JSON by Riot ID (gameName#tagLine)."""
        self._require(game_name, "Game name")
        self._require(tag_line, "Tag line")
        return await self._get(self.endpoints.account_by_riot_id(game_name, tag_line))

    # Summoner endpoints
    async def fetch_summoner_by_puuid(self, puuid: str) -> str:
        """Get summoner JSON by PUUID."""
        self._require(puuid, "PUUID")
        return await self._get(self.endpoints.summoner_by_puuid(puuid))

    # Match endpoints
    async def fetch_match_ids_by_puuid(
        self, puuid: str, start: int = 0, count: int = 10
    ) -> str:
        """Get the JSON array of match ids for a PUUID, newest first."""
        self._require(puuid, "PUUID")
        if start < 0:
            raise ValueError("Start index cannot be negative")
        if count < 1 or count > MAX_MATCH_IDS_PER_REQUEST:
            raise ValueError(
                f"Count must be between 1 and {MAX_MATCH_IDS_PER_REQUEST}"
            )

        url = self.endpoints.match_ids_by_puuid(puuid, start, count)
        logger.debug("Fetching match ids", start=start, count=count)
        return await self._get(url)

    async def fetch_match_by_id(self, match_id: str) -> str:
        """Get match JSON by match ID."""
        self._require(match_id, "Match ID")
        return await self._get(self.endpoints.match_by_id(match_id))

    # League endpoints
    async def fetch_league_entries_by_puuid(self, puuid: str) -> str:
        """Get league entries JSON by PUUID."""
        self._require(puuid, "PUUID")
        return await self._get(self.endpoints.league_entries_by_puuid(puuid))

    # Champion mastery endpoints
    async def fetch_masteries_by_puuid(self, puuid: str) -> str:
        """Get champion masteries JSON by PUUID."""
        self._require(puuid, "PUUID")
        return await self._get(self.endpoints.masteries_by_puuid(puuid))
