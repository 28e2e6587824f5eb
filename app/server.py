"""Process entry point: ``cheesa-chatbot`` or ``python -m app``."""

from __future__ import annotations

import logging
import sys

import uvicorn

from app.core.errors import StartupConfigurationError
from app.core.logging import configure_logging
from app.core.settings import get_settings
from app.core.supervisor import ProcessSupervisor
from app.dependencies import get_conversation_relay
from app.main import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    configure_logging(settings)

    try:
        get_conversation_relay()
    except StartupConfigurationError as e:
        logger.critical("Refusing to start: %s", e)
        sys.exit(1)

    supervisor = ProcessSupervisor()
    supervisor.install()

    app = create_app(supervisor=supervisor)

    logger.info("%s running on http://localhost:%d", settings.app_name, settings.port)
    logger.info("- Chat interface available at http://localhost:%d", settings.port)
    logger.info("- API endpoint: POST http://localhost:%d/api/chat", settings.port)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
