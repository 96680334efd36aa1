"""Application error types"""
from typing import Any, Optional


class LogideskError(Exception):
    """Base class for application errors"""


class ValidationError(LogideskError, ValueError):
    """User input rejected before any network call"""


class ProviderError(LogideskError):
    """Upstream LLM or file-analysis endpoint failed or returned an unusable body"""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class StorageQuotaError(LogideskError):
    """Persisting a value would exceed the key-value store capacity"""

    def __init__(self, key: str, required_bytes: int, quota_bytes: int):
        super().__init__(
            f"Storage quota exceeded while writing '{key}': "
            f"{required_bytes} bytes required, {quota_bytes} bytes available"
        )
        self.key = key
        self.required_bytes = required_bytes
        self.quota_bytes = quota_bytes


class ActionParseError(LogideskError):
    """Embedded action payload could not be decoded"""
