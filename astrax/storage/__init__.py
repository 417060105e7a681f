"""Storage: key-value backends, typed repositories and change notification."""

from .events import ChangeNotifier
from .key_value_store import InMemoryKeyValueStore, JsonFileKeyValueStore, KeyValueStore
from .repositories import ApplicationStore, ListingStore, ProfileStore

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "ChangeNotifier",
    "ProfileStore",
    "ListingStore",
    "ApplicationStore",
]
