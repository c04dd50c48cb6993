# backend/tests/core/test_launcher.py
import logging
from unittest.mock import patch

from pathbot import __main__ as launcher
from pathbot.core.config import settings


@patch("pathbot.__main__.setup_logging")
@patch("pathbot.__main__.uvicorn.run")
def test_launcher_announces_the_port_it_serves_on(mock_run, mock_setup_logging, caplog):
    """
    The listening message comes from the launcher, which is the only place
    that knows which port uvicorn is handed.
    """
    with caplog.at_level(logging.INFO, logger="pathbot.__main__"):
        launcher.main()

    mock_setup_logging.assert_called_once_with()
    mock_run.assert_called_once_with(
        "pathbot.main:app", host=settings.HOST, port=settings.PORT, log_config=None
    )
    assert f"Pathbot testing server listening on port {settings.PORT}!" in caplog.text
