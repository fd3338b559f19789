"""
Fan-out of server events to connected websocket clients.
"""

import uuid
from typing import Protocol

from ..logging import get_logger

logger = get_logger(__name__)


class TextSender(Protocol):
    async def send_text(self, data: str) -> None: ...


class Broadcaster:
    """Tracks connected websocket clients and pushes events to all of them.

    There is no per-client filtering: every connected client receives every
    broadcast.
    """

    def __init__(self):
        self._connections: dict[str, TextSender] = {}

    def connect(self, websocket: TextSender, connection_id: str | None = None) -> str:
        """Register a client and return its connection id."""
        if connection_id is None:
            connection_id = uuid.uuid4().hex
        self._connections[connection_id] = websocket
        logger.debug(
            "Websocket client registered",
            client=connection_id,
            clients=len(self._connections),
        )
        return connection_id

    def disconnect(self, connection_id: str) -> None:
        if self._connections.pop(connection_id, None) is not None:
            logger.debug(
                "Websocket client unregistered",
                client=connection_id,
                clients=len(self._connections),
            )

    @property
    def client_count(self) -> int:
        return len(self._connections)

    async def broadcast(self, message: str) -> int:
        """Send a message to every connected client.

        Clients whose send fails are dropped. Never raises.

        Returns:
            Number of clients the message was delivered to
        """
        delivered = 0
        failed: list[str] = []

        # Snapshot: clients may connect or disconnect while we are sending
        for connection_id, websocket in list(self._connections.items()):
            try:
                await websocket.send_text(message)
                delivered += 1
            except Exception as e:
                logger.warning(
                    "Failed to send broadcast to websocket client",
                    client=connection_id,
                    error=str(e),
                )
                failed.append(connection_id)

        for connection_id in failed:
            self.disconnect(connection_id)

        logger.info("Broadcast sent", delivered=delivered, dropped=len(failed))
        return delivered
