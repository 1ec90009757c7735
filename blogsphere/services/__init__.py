from blogsphere.services.storage_service import (
    KeyValueStore,
    MemoryKeyValueStore,
    JsonFileKeyValueStore,
    FirestoreKeyValueStore,
    StorageService,
    create_key_value_store,
)
from blogsphere.services.data_store import DataStore
from blogsphere.services.seeding import seed_sample_posts

__all__ = [
    "KeyValueStore",
    "MemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "FirestoreKeyValueStore",
    "StorageService",
    "create_key_value_store",
    "DataStore",
    "seed_sample_posts",
]
