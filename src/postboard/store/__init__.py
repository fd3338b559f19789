"""
Data store for users, posts and comments
"""

from .base import DataStore, IdSequence, SeedDataError, StoreException
from .memory import InMemoryStore
from .records import CommentRecord, PostRecord, UserRecord, normalize_id
from .seed import SAMPLE_DATA, SeedData, create_seeded_store, load_seed_data

__all__ = [
    "DataStore",
    "IdSequence",
    "InMemoryStore",
    "StoreException",
    "SeedDataError",
    "UserRecord",
    "PostRecord",
    "CommentRecord",
    "normalize_id",
    "SeedData",
    "SAMPLE_DATA",
    "create_seeded_store",
    "load_seed_data",
]
