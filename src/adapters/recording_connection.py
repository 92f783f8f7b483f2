import logging

from ports.connection import ConnectionMessage, MessageType

logger = logging.getLogger(__name__)


class RecordingConnection:
    """In-memory connection that logs and keeps every message it is sent."""

    def __init__(self, connection_id: str = "") -> None:
        self._connection_id = connection_id
        self._messages: list[ConnectionMessage] = []

    @property
    def connection_id(self) -> str:
        return self._connection_id

    @property
    def messages(self) -> list[ConnectionMessage]:
        return list(self._messages)

    async def send(self, message: ConnectionMessage) -> None:
        if message.message_type is MessageType.BINARY:
            logger.debug("-> %s (%s, %d bytes)", message.path, message.content_type, len(message.body))
        else:
            logger.debug("-> %s (%s) %s", message.path, message.content_type, message.body)
        self._messages.append(message)


class RecordingConnectionFactory:
    def __init__(self) -> None:
        self._connections: list[RecordingConnection] = []

    @property
    def connections(self) -> list[RecordingConnection]:
        return list(self._connections)

    async def create(self, authentication: object, connection_id: str) -> RecordingConnection:
        connection = RecordingConnection(connection_id=connection_id)
        self._connections.append(connection)
        return connection
