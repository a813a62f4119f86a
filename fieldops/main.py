"""
Main application entry point.
"""

from fieldops.api.app import create_app
from fieldops.config.logging import get_logger
from fieldops.config.settings import settings

logger = get_logger(__name__)

app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting FieldOps server", host=settings.API_HOST, port=settings.API_PORT)

    uvicorn.run(
        "fieldops.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )
