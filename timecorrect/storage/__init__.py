"""History store implementations."""

from typing import Any, Dict

from .base import HistoryStore, HistoryStoreError
from .json_file import JsonFileHistoryStore
from .memory import InMemoryHistoryStore


def create_store(config: Dict[str, Any]) -> HistoryStore:
    """Build the store named by the 'storage' section of a config dict."""
    storage = (config or {}).get('storage') or {}
    backend = storage.get('backend', 'json')
    if backend == 'memory':
        return InMemoryHistoryStore()
    if backend == 'json':
        return JsonFileHistoryStore(storage.get('directory', 'history'))
    raise ValueError(f"Unknown storage backend: {backend}")


__all__ = [
    'HistoryStore',
    'HistoryStoreError',
    'InMemoryHistoryStore',
    'JsonFileHistoryStore',
    'create_store',
]
