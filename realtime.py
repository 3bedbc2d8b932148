"""Real-time fan-out of asset mutations over Socket.IO.

Every connected client receives every event; the channel itself performs no
authentication and keeps no backlog for clients that are offline.
"""

from flask import request

from logger import get_logger

logger = get_logger("asset_tracker.realtime")

ASSET_CREATED = "newAsset"
ASSET_UPDATED = "updateAsset"
ASSET_DELETED = "deleteAsset"


class Broadcaster:
    """Process-wide publish point bound to a ``SocketIO`` instance."""

    def __init__(self) -> None:
        self.socketio = None
        self.connected_clients: set[str] = set()

    def init_app(self, app, socketio) -> None:
        self.socketio = socketio
        self.connected_clients.clear()
        app.extensions["broadcaster"] = self

        @socketio.on("connect")
        def _on_connect(auth=None):
            self.connected_clients.add(request.sid)
            logger.info("Client connected: %s", request.sid)

        @socketio.on("disconnect")
        def _on_disconnect(*args):
            self.connected_clients.discard(request.sid)
            logger.info("Client disconnected: %s", request.sid)

    def publish(self, event: str, payload) -> None:
        if self.socketio is None:
            raise RuntimeError("Broadcaster used before init_app()")
        logger.debug("Broadcasting %s to %d client(s)", event, len(self.connected_clients))
        self.socketio.emit(event, payload)

    def asset_created(self, asset: dict) -> None:
        self.publish(ASSET_CREATED, asset)

    def asset_updated(self, asset: dict) -> None:
        self.publish(ASSET_UPDATED, asset)

    def asset_deleted(self, asset_id: int) -> None:
        self.publish(ASSET_DELETED, str(asset_id))
