"""
Shared dependencies for routes.
"""

from hoverdict.core.store import DictionaryStore


_store = DictionaryStore()


def get_store() -> DictionaryStore:
    return _store
