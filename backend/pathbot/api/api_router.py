from fastapi import APIRouter

from .endpoints import maze

# This router is included with settings.API_PREFIX ("/pathbot") by main.py,
# so "/start" here becomes POST "/pathbot/start".
api_router = APIRouter()

api_router.include_router(maze.router, tags=["Maze"])
