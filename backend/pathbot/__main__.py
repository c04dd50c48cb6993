# backend/pathbot/__main__.py
import logging

import uvicorn

from pathbot.core.config import settings
from pathbot.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main():
    setup_logging()
    logger.info(f"Pathbot testing server listening on port {settings.PORT}!")
    # log_config=None keeps uvicorn from replacing the handlers set up above
    uvicorn.run("pathbot.main:app", host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
