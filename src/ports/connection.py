from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol


class MessageType(Enum):
    TEXT = auto()
    BINARY = auto()


@dataclass(frozen=True)
class ConnectionMessage:
    message_type: MessageType
    path: str
    request_id: str
    content_type: str
    body: str | bytes


class ConnectionPort(Protocol):
    async def send(self, message: ConnectionMessage) -> None: ...


class ConnectionFactoryPort(Protocol):
    async def create(self, authentication: object, connection_id: str) -> ConnectionPort: ...
