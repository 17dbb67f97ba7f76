"""Connector for the remote ingredient consolidation service."""

from typing import Any

import httpx
from pydantic import BaseModel, Field, ValidationError
from tenacity import (
    RetryError,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from grocerylist.config import Settings, get_settings
from grocerylist.connectors.base import ConnectorError, ConnectorResponse
from grocerylist.logging_config import get_logger

logger = get_logger(__name__)


class IngredientPayload(BaseModel):
    """One pre-merged ingredient as returned by the remote service."""

    name: str = Field(min_length=1)
    quantity: float | None = None
    unit: str | None = None


class ConsolidatedListPayload(BaseModel):
    """Body of a successful remote consolidation response."""

    ingredients: list[IngredientPayload]


class EnhancementConnector:
    """Connector for the remote consolidation service."""

    BACKOFF_BASE = 0.5
    BACKOFF_MAX = 5

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        access_token: str | None = None,
        max_retries: int | None = None,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = settings or get_settings()
        self.url = url or settings.enhance_url
        self.timeout = timeout or settings.enhance_timeout
        self.access_token = access_token if access_token is not None else settings.enhance_access_token
        self.max_retries = max(1, max_retries or settings.enhance_max_retries)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            headers = {
                "Accept": "application/json",
                "Content-Type": "application/json",
                "User-Agent": "GroceryList/1.0",
            }
            if self.access_token:
                headers["Authorization"] = f"Bearer {self.access_token}"
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(self, payload: dict[str, Any]) -> ConnectorResponse:
        """POST to the consolidation endpoint, retrying transport failures."""
        url = self.url
        client = await self._get_client()

        @retry(
            retry=retry_if_exception_type((httpx.TimeoutException, httpx.NetworkError)),
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=self.BACKOFF_BASE, max=self.BACKOFF_MAX),
            reraise=False,
        )
        async def _do_request() -> httpx.Response:
            return await client.post(url, json=payload)

        try:
            response = await _do_request()
        except RetryError as e:
            logger.error(f"Request failed after {self.max_retries} attempts: {url}")
            raise ConnectorError(
                f"Request failed after {self.max_retries} attempts",
                response=str(e.last_attempt.exception()),
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Request to {url} failed: {e}")
            raise ConnectorError(f"Request failed: {e}", response=str(e)) from e

        if response.status_code >= 400:
            error_detail = response.text[:500] if response.text else "No details"
            logger.error(f"API error {response.status_code} for {url}: {error_detail}")
            raise ConnectorError(
                f"API request failed with status {response.status_code}",
                status_code=response.status_code,
                response=error_detail,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ConnectorError(
                "Consolidation service returned invalid JSON",
                status_code=response.status_code,
                response=response.text[:500],
            ) from e

        return ConnectorResponse(
            data=data,
            status_code=response.status_code,
            headers=dict(response.headers),
            raw_response=data,
        )

    async def get_consolidated_list(self, recipe_ids: list[str]) -> list[IngredientPayload]:
        """
        Ask the remote service for a consolidated list of the given recipes.

        Args:
            recipe_ids: Identifiers of the recipes being shopped for.

        Returns:
            The service's pre-merged ingredients, in the order it sent them.

        Raises:
            ConnectorError: On transport failure, non-2xx status, or a body
                that does not match the expected schema.
        """
        logger.info(f"Requesting remote consolidation for {len(recipe_ids)} recipes")
        response = await self._request({"recipeIds": list(recipe_ids)})

        try:
            payload = ConsolidatedListPayload.model_validate(response.data)
        except ValidationError as e:
            logger.error(f"Unexpected consolidation response shape: {e.error_count()} errors")
            raise ConnectorError(
                "Consolidation service returned an unexpected response",
                status_code=response.status_code,
                response=str(e),
            ) from e

        logger.info(f"Remote consolidation returned {len(payload.ingredients)} ingredients")
        return payload.ingredients

    async def __aenter__(self) -> "EnhancementConnector":
        await self._get_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
