"""Application settings loaded from the environment"""
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv(dotenv_path=".env")


class Settings(BaseModel):
    """Runtime configuration"""
    # Assistant chat-completion provider (Deepseek)
    deepseek_api_key: Optional[str] = None
    deepseek_base_url: str = "https://api.deepseek.com/v1"
    assistant_model: str = "deepseek-chat"

    # File analysis provider (OpenAI via langchain-openai)
    openai_api_key: Optional[str] = None
    analysis_model: str = "gpt-4o-mini"

    llm_temperature: float = 0.3
    llm_timeout_seconds: float = 60.0

    # Prompt construction
    max_content_chars: int = Field(100_000, gt=0)
    history_window: int = Field(10, ge=0)

    # Key-value store
    storage_backend: str = "json"  # json | memory | supabase
    storage_path: str = ".logidesk/store.json"
    storage_quota_bytes: Optional[int] = 5 * 1024 * 1024

    display_timezone: str = "Europe/Kyiv"

    supabase_url: Optional[str] = None
    supabase_service_role_key: Optional[str] = None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def load_settings() -> Settings:
    """Build settings from environment variables"""
    defaults = Settings()
    quota = _env_int("STORAGE_QUOTA_BYTES", defaults.storage_quota_bytes or 0)

    return Settings(
        deepseek_api_key=os.getenv("DEEPSEEK_API_KEY"),
        deepseek_base_url=os.getenv("DEEPSEEK_BASE_URL", defaults.deepseek_base_url),
        assistant_model=os.getenv("ASSISTANT_MODEL", defaults.assistant_model),
        openai_api_key=os.getenv("OPENAI_API_KEY"),
        analysis_model=os.getenv("ANALYSIS_MODEL", defaults.analysis_model),
        llm_temperature=_env_float("LLM_TEMPERATURE", defaults.llm_temperature),
        llm_timeout_seconds=_env_float("LLM_TIMEOUT_SECONDS", defaults.llm_timeout_seconds),
        max_content_chars=_env_int("MAX_CONTENT_CHARS", defaults.max_content_chars),
        history_window=_env_int("HISTORY_WINDOW", defaults.history_window),
        storage_backend=os.getenv("STORAGE_BACKEND", defaults.storage_backend),
        storage_path=os.getenv("STORAGE_PATH", defaults.storage_path),
        storage_quota_bytes=quota if quota > 0 else None,
        display_timezone=os.getenv("DISPLAY_TIMEZONE", defaults.display_timezone),
        supabase_url=os.getenv("SUPABASE_URL"),
        supabase_service_role_key=os.getenv("SUPABASE_SERVICE_ROLE_KEY"),
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create settings singleton"""
    global _settings

    if _settings is None:
        _settings = load_settings()

    return _settings


def reset_settings():
    """Reset the settings singleton (useful for testing)"""
    global _settings
    _settings = None
