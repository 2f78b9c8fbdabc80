"""
Client data layer: HTTP client, persisted local storage, access helpers and
the optimistic board store.
"""
from kanbanify.client.api import ApiClient, ApiError
from kanbanify.client.storage import LocalStorage
from kanbanify.client.store import BoardState, BoardStore, get_store

__all__ = ["ApiClient", "ApiError", "LocalStorage", "BoardState", "BoardStore", "get_store"]
