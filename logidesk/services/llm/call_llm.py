import logging
from typing import Dict, List, Optional

import openai
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from logidesk.errors import ProviderError

logger = logging.getLogger(__name__)


class LLMService:
    def __init__(
        self,
        model: str = "gpt-4o-mini",
        temperature: float = 0.3,
        api_key: Optional[str] = None,
        llm: Optional[BaseChatModel] = None,
    ):
        self.model = model
        self.temperature = temperature
        self._api_key = api_key
        self._llm = llm

    @property
    def llm(self) -> BaseChatModel:
        # Built on first use so the app can start without OPENAI_API_KEY
        if self._llm is None:
            kwargs = {"model": self.model, "temperature": self.temperature}
            if self._api_key:
                kwargs["api_key"] = self._api_key
            try:
                self._llm = ChatOpenAI(**kwargs)
            except (openai.OpenAIError, ValueError) as e:
                raise ProviderError(f"Could not initialise {self.model}: {e}") from e
        return self._llm

    async def invoke(self, messages: List[Dict[str, str]], **kwargs) -> str:
        """
        Invoke the LLM and return the response text.

        Args:
            messages: List of message dictionaries with 'role' and 'content' keys
            **kwargs: Additional arguments to pass to the LLM

        Raises:
            ProviderError: if the provider call fails
        """
        lc_messages = _to_langchain_messages(messages)

        try:
            response = await self.llm.ainvoke(lc_messages, **kwargs)
        except openai.APIStatusError as e:
            logger.error(f"{self.model} returned {e.status_code}: {e.message}")
            raise ProviderError(
                f"AI analysis failed: {e.message}",
                status_code=e.status_code,
                body=e.body,
            ) from e
        except openai.OpenAIError as e:
            logger.error(f"{self.model} call failed: {e}")
            raise ProviderError(f"AI analysis failed: {e}") from e

        return str(response.content)


def _to_langchain_messages(messages: List[Dict[str, str]]) -> List[BaseMessage]:
    return [
        SystemMessage(content=msg["content"]) if msg["role"] == "system"
        else HumanMessage(content=msg["content"]) if msg["role"] == "user"
        else AIMessage(content=msg["content"])
        for msg in messages
    ]
