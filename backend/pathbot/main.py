# backend/pathbot/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# --- Setup Logging First ---
from pathbot.core.logging_config import setup_logging

setup_logging()

logger = logging.getLogger(__name__)

from pathbot.api.api_router import api_router
from pathbot.core.config import settings
from pathbot.game_logic.room_resolver import InvalidDirectionError

BAD_MOVE_MESSAGE = "bad move"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- STARTUP ---
    logger.info("--- Application Startup Initiated ---")

    yield  # The application is now running and accepting requests

    # --- SHUTDOWN ---
    logger.info("--- Application Shutdown Complete ---")


# --- FASTAPI APP INITIALIZATION ---
app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

# --- MIDDLEWARE ---
# Clients under test run from arbitrary origins (dev servers, test runners)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- ERROR HANDLERS ---
@app.exception_handler(InvalidDirectionError)
async def invalid_direction_handler(request: Request, exc: InvalidDirectionError):
    logger.info(f"Rejected move {exc.direction!r} from room {exc.room}.")
    return JSONResponse(status_code=400, content={"message": BAD_MOVE_MESSAGE})


# --- ROUTERS ---
app.include_router(api_router, prefix=settings.API_PREFIX)


# --- ROOT ENDPOINT ---
@app.get("/")
async def root():
    logger.debug("GET / request received.")
    return {"message": f"Welcome to {settings.PROJECT_NAME}. POST {settings.API_PREFIX}/start to enter the maze."}
