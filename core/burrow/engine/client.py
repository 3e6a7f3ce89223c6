"""
Chat completion client for an OpenAI-compatible backend (e.g. llama-server).
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional, Sequence

import httpx

from burrow.config import DEFAULT_BASE_URL, DEFAULT_MODEL, DEFAULT_TIMEOUT
from burrow.engine.errors import TransportError
from burrow.utils.logging import logger


class Role(str, Enum):
    """Chat message roles."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """OpenAI-style chat message."""

    role: Role
    content: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["role"] = self.role.value
        return data


class ChatClient:
    """
    Non-streaming chat completions over HTTP.

    Every failure (network, timeout, non-2xx status, malformed envelope)
    is raised as TransportError.
    """

    COMPLETIONS_PATH = "/v1/chat/completions"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        model: str = DEFAULT_MODEL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Backend root, e.g. http://127.0.0.1:8080
            model: Model identifier sent with every request
            timeout: Seconds before a request is abandoned
            http_client: Optional pre-built client (not closed by aclose)
        """
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> "ChatClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def complete(self, messages: Sequence[Message]) -> str:
        """
        Request a completion for the full message history.

        Args:
            messages: Ordered conversation so far

        Returns:
            The assistant's reply text ("" if the backend returned no choices)
        """
        url = f"{self.base_url}{self.COMPLETIONS_PATH}"
        body = {
            "model": self.model,
            "messages": [message.to_dict() for message in messages],
            "stream": False,
        }

        logger.debug(f"POST {url} ({len(messages)} messages)")
        try:
            response = await self._client.post(url, json=body, timeout=self.timeout)
        except httpx.TimeoutException as e:
            raise TransportError(f"LLM request timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise TransportError(f"LLM request failed: {e}") from e

        if not response.is_success:
            raise TransportError(f"LLM error {response.status_code}: {response.text}")

        return self._parse_content(response)

    @staticmethod
    def _parse_content(response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError as e:
            raise TransportError(f"LLM returned non-JSON body: {e}") from e

        try:
            choices = payload["choices"]
            if not choices:
                return ""
            content = choices[0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise TransportError(f"Malformed LLM response envelope: {e!r}") from e

        if not isinstance(content, str):
            raise TransportError(
                f"Malformed LLM response envelope: content is {type(content).__name__}"
            )
        return content
