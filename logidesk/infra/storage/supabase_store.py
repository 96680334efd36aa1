"""Supabase table backed key-value store"""
from typing import List, Optional

from supabase import Client  # type: ignore

from .base import KeyValueStore


class SupabaseKeyValueStore(KeyValueStore):
    """
    Key-value store over a two-column Supabase table (key text primary key, value text).
    Hides Supabase implementation details from the rest of the application.
    """

    def __init__(self, client: Client, table_name: str = "kv_store"):
        self._client = client
        self._table_name = table_name

    def get(self, key: str) -> Optional[str]:
        response = self._client.table(self._table_name).select("value").eq("key", key).execute()

        if not response.data:
            return None

        return response.data[0]["value"]

    def set(self, key: str, value: str) -> None:
        self._client.table(self._table_name).upsert({"key": key, "value": value}).execute()

    def remove(self, key: str) -> None:
        self._client.table(self._table_name).delete().eq("key", key).execute()

    def keys(self) -> List[str]:
        response = self._client.table(self._table_name).select("key").execute()
        return [row["key"] for row in response.data or []]
