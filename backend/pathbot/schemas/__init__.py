# File: backend/pathbot/schemas/__init__.py

from .room import (
    Direction,
    MessageResponse,
    MoveRequest,
    RoomDescriptor,
    RoomStatusEnum,
)

__all__ = [
    "Direction",
    "MessageResponse",
    "MoveRequest",
    "RoomDescriptor",
    "RoomStatusEnum",
]
