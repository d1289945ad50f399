"""
Application entry point.

Configures logging and builds the application; everything else is delegated to
the factory and the lifespan hook.
"""

import logging

from appointment_scheduling.config.settings import get_settings
from appointment_scheduling.core.app_factory import create_app
from appointment_scheduling.core.shared.logger import configure_logging

settings = get_settings()

configure_logging(level=settings.LOG_LEVEL, format_type=settings.LOG_FORMAT)
logger = logging.getLogger(__name__)

app = create_app(settings)

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting application in {settings.ENVIRONMENT} mode")
    uvicorn.run(
        "appointment_scheduling.main:app",
        host="0.0.0.0",
        port=8001,
        reload=settings.is_development,
    )
