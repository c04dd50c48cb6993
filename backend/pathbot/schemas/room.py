# backend/pathbot/schemas/room.py
from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Direction(str, Enum):
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"


class RoomStatusEnum(str, Enum):
    IN_PROGRESS = "in-progress"
    FINISHED = "finished"


# --- Room Schemas ---

# What the maze hands back after a start or a move. A finished maze carries
# only the status, so exits/location_path stay None and are dropped on output.
class RoomDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: RoomStatusEnum
    exits: Optional[Tuple[Direction, ...]] = Field(
        None, description="Directions advertised from this room. Advisory only."
    )
    location_path: Optional[str] = Field(
        None,
        alias="locationPath",
        description="Path to POST the next move to, e.g. '/pathbot/rooms/-1'.",
    )


class MoveRequest(BaseModel):
    # Left untyped: anything other than "N", "E" or "S" is a bad move, not a validation error
    direction: Any = None


class MessageResponse(BaseModel):
    message: str
