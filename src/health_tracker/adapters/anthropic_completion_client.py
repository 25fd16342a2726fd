"""Anthropic Messages API client for text completion."""

from dataclasses import dataclass

import httpx

from health_tracker.services.extraction import CompletionClient

ANTHROPIC_VERSION = "2023-06-01"


@dataclass
class HttpxAnthropicCompletionClient(CompletionClient):
    """HTTPX-backed completion client for the Anthropic Messages API."""

    api_key: str
    model: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 30.0

    @classmethod
    def create(
        cls,
        api_key: str,
        model: str,
        base_url: str = "https://api.anthropic.com",
        timeout_seconds: float = 30.0,
    ) -> "HttpxAnthropicCompletionClient":
        """Create a completion client with a managed httpx session."""
        return cls(
            api_key=api_key,
            model=model,
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def complete(
        self, *, prompt: str, max_tokens: int, temperature: float
    ) -> list[dict[str, object]]:
        """Send a single user message and return the response content blocks."""
        response = await self.http_client.post(
            f"{self.base_url}/v1/messages",
            headers={
                "x-api-key": self.api_key,
                "anthropic-version": ANTHROPIC_VERSION,
            },
            json={
                "model": self.model,
                "max_tokens": max_tokens,
                "temperature": temperature,
                "messages": [{"role": "user", "content": prompt}],
            },
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        payload = response.json()
        content = payload.get("content")
        if not isinstance(content, list):
            raise RuntimeError("Anthropic response has no content")
        return content

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
