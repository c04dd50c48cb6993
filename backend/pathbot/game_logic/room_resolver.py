# backend/pathbot/game_logic/room_resolver.py
"""
Room numbering and move resolution for the Pathbot maze.

The maze is a single corridor of integer rooms. Room 0 is the start; north
counts down, south counts up, and east out of room 0 is the exit. Only the
start room advertises the east exit, so the finish can't be stumbled into
from anywhere else.
"""
from typing import Any

from pathbot.core.config import settings
from pathbot.schemas.room import Direction, RoomDescriptor, RoomStatusEnum

START_ROOM = 0


class InvalidDirectionError(ValueError):
    """Raised when a direction isn't a legal move from the given room."""

    def __init__(self, room: int, direction: Any):
        self.room = room
        self.direction = direction
        super().__init__(f"bad move: {direction!r} from room {room}")


def room_location_path(room: int) -> str:
    return f"{settings.API_PREFIX}/rooms/{room}"


ROOT_ROOM = RoomDescriptor(
    status=RoomStatusEnum.IN_PROGRESS,
    exits=(Direction.NORTH, Direction.EAST, Direction.SOUTH),
    location_path=room_location_path(START_ROOM),
)

FINISHED = RoomDescriptor(status=RoomStatusEnum.FINISHED)


def _standard_room(room: int) -> RoomDescriptor:
    return RoomDescriptor(
        status=RoomStatusEnum.IN_PROGRESS,
        exits=(Direction.NORTH, Direction.SOUTH),
        location_path=room_location_path(room),
    )


def parse_direction(room: int, token: Any) -> Direction:
    """Turn a raw token into a Direction. Matching is exact: 'n' is not 'N'."""
    if not isinstance(token, str):
        raise InvalidDirectionError(room, token)
    try:
        return Direction(token)
    except ValueError:
        raise InvalidDirectionError(room, token) from None


def start_maze() -> RoomDescriptor:
    return ROOT_ROOM


def resolve_move(room: int, direction: Any) -> RoomDescriptor:
    """
    Work out where moving `direction` from `room` lands.

    Returns the finished descriptor for east out of the start room, the root
    descriptor when stepping back into room 0, and a standard descriptor
    otherwise. Raises InvalidDirectionError for anything else.
    """
    move = parse_direction(room, direction)

    if move is Direction.EAST:
        if room == START_ROOM:
            return FINISHED
        raise InvalidDirectionError(room, direction)

    if move is Direction.NORTH:
        next_room = room - 1
    else:
        next_room = room + 1

    if next_room == START_ROOM:
        return ROOT_ROOM
    return _standard_room(next_room)
