# backend/pathbot/api/endpoints/maze.py
import logging

from fastapi import APIRouter, Depends, Request

from ... import schemas
from ...game_logic import room_resolver

logger = logging.getLogger(__name__)

router = APIRouter()


async def read_move_request(request: Request) -> schemas.MoveRequest:
    """
    Read the move body leniently. Anything that isn't a JSON object (no body,
    another content type, unparseable JSON, a bare string or list) counts as a
    move with no direction, which the resolver rejects as a bad move.
    """
    if "application/json" not in request.headers.get("content-type", ""):
        return schemas.MoveRequest()
    try:
        payload = await request.json()
    except ValueError:
        logger.debug("Move body is not valid JSON; treating it as empty.")
        return schemas.MoveRequest()
    if not isinstance(payload, dict):
        return schemas.MoveRequest()
    return schemas.MoveRequest.model_validate(payload)


@router.post("/start", response_model=schemas.RoomDescriptor, response_model_exclude_none=True)
async def start_maze():
    logger.debug("POST /start request received.")
    return room_resolver.start_maze()


@router.post(
    "/rooms/{room}",
    response_model=schemas.RoomDescriptor,
    response_model_exclude_none=True,
    responses={400: {"model": schemas.MessageResponse, "description": "Unrecognized direction"}},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": schemas.MoveRequest.model_json_schema()}},
        }
    },
)
async def move_from_room(room: int, move: schemas.MoveRequest = Depends(read_move_request)):
    # InvalidDirectionError is turned into a 400 by the handler registered in main.py
    next_room = room_resolver.resolve_move(room, move.direction)
    logger.debug(f"Move {move.direction!r} from room {room} -> {next_room.status.value} {next_room.location_path or ''}")
    return next_room
