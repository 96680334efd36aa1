"""Service container - explicit wiring of stateful services"""
import logging
from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from logidesk.config import Settings, get_settings
from logidesk.infra.storage import KeyValueStore, get_key_value_store
from logidesk.services.assistant import AssistantService, UploadedFileStore
from logidesk.services.conversation import ConversationStore
from logidesk.services.llm import ChatCompletionClient, LLMService
from logidesk.services.tasks import TaskService
from logidesk.services.timer import TimerManager
from logidesk.utils.datetime_helper import get_timezone

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    settings: Settings
    store: KeyValueStore
    timer: TimerManager
    tasks: TaskService
    conversations: ConversationStore
    files: UploadedFileStore
    chat_client: ChatCompletionClient
    analysis_llm: LLMService
    assistant: AssistantService
    display_tz: tzinfo


def build_container(
    settings: Optional[Settings] = None,
    store: Optional[KeyValueStore] = None,
    chat_client: Optional[ChatCompletionClient] = None,
    analysis_llm: Optional[LLMService] = None,
) -> ServiceContainer:
    """Create every service over one store. Any collaborator can be replaced (tests)."""
    settings = settings or get_settings()
    store = store or get_key_value_store(settings)

    chat_client = chat_client or ChatCompletionClient(
        api_key=settings.deepseek_api_key,
        base_url=settings.deepseek_base_url,
        model=settings.assistant_model,
        temperature=settings.llm_temperature,
        timeout=settings.llm_timeout_seconds,
    )
    analysis_llm = analysis_llm or LLMService(
        model=settings.analysis_model,
        temperature=settings.llm_temperature,
        api_key=settings.openai_api_key,
    )

    timer = TimerManager(store)
    conversations = ConversationStore(store)
    files = UploadedFileStore(store, max_content_chars=settings.max_content_chars)

    container = ServiceContainer(
        settings=settings,
        store=store,
        timer=timer,
        tasks=TaskService(store, timer),
        conversations=conversations,
        files=files,
        chat_client=chat_client,
        analysis_llm=analysis_llm,
        assistant=AssistantService(
            conversations=conversations,
            files=files,
            client=chat_client,
            max_content_chars=settings.max_content_chars,
            history_window=settings.history_window,
        ),
        display_tz=get_timezone(settings.display_timezone),
    )
    logger.info("Service container ready")
    return container
