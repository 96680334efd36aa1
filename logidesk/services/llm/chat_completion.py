"""OpenAI-compatible chat completion client (Deepseek)"""
import logging
from typing import Any, Dict, List, Optional

import httpx

from logidesk.errors import ProviderError

logger = logging.getLogger(__name__)


class ChatCompletionClient:
    """
    Single request / single response call to a /chat/completions endpoint.
    No retries. Every failure mode is reported as ProviderError.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str,
        model: str,
        temperature: float = 0.3,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.temperature = temperature
        self.timeout = timeout
        self._transport = transport

    async def complete(self, messages: List[Dict[str, str]]) -> str:
        """
        Send messages and return the assistant's text verbatim.

        Raises:
            ProviderError: missing key, transport failure, non-2xx status, or malformed body
        """
        if not self.api_key:
            raise ProviderError("Assistant API key is not set")

        url = f"{self.base_url}/chat/completions"
        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        logger.info(f"Sending {len(messages)} messages to {self.model}")

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                response = await client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Chat completion request failed: {e}")
            raise ProviderError(f"Request to {self.model} failed: {e}") from e

        data = _parse_body(response)

        if response.status_code >= 400:
            logger.error(f"API error details: {data if data is not None else response.text}")
            raise ProviderError(
                f"{self.model} API failed: {_error_message(data, response)}",
                status_code=response.status_code,
                body=data if data is not None else response.text,
            )

        content = _extract_content(data)
        if content is None:
            logger.error(f"Malformed chat completion body: {data if data is not None else response.text}")
            raise ProviderError(
                f"{self.model} API returned an unexpected response",
                status_code=response.status_code,
                body=data if data is not None else response.text,
            )

        logger.info(f"Received response from {self.model}")
        return content


def _parse_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _error_message(data: Any, response: httpx.Response) -> str:
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error
        return str(data)
    return response.text or f"HTTP {response.status_code}"


def _extract_content(data: Any) -> Optional[str]:
    """choices[0].message.content, or None if any step is missing"""
    if not isinstance(data, dict):
        return None

    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None

    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None

    return content if isinstance(content, str) else None
