"""
Accessors for the per-request GraphQL context.

The context is a plain dict built by the router's context getter, carrying
``request``, ``store``, ``settings`` and ``broadcaster``.
"""

from __future__ import annotations

import strawberry

from ..config import Settings, settings as default_settings
from ..logging import get_logger
from ..realtime.broadcaster import Broadcaster
from ..store.base import DataStore

logger = get_logger(__name__)


def get_store(info: strawberry.Info) -> DataStore:
    store = info.context.get("store")
    if store is None:
        logger.error("Data store not found in GraphQL context")
        raise RuntimeError("Data store not found in GraphQL context")
    return store


def get_settings(info: strawberry.Info) -> Settings:
    return info.context.get("settings") or default_settings


def get_broadcaster(info: strawberry.Info) -> Broadcaster | None:
    return info.context.get("broadcaster")
