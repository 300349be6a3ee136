"""
Development server for the decision API.

Reads HOST, PORT and LOG_LEVEL from the environment or ``.env`` (see
``app.core.config``) and serves ``app.main:app`` with auto-reload.

Usage:
    python scripts/run_dev.py
    PORT=9000 LOG_LEVEL=DEBUG python scripts/run_dev.py
"""

import logging
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# .env must be loaded before app.core.config builds its settings
from dotenv import load_dotenv

load_dotenv(project_root / ".env")

import uvicorn

from app.core.config import settings
from app.core.logging import configure_logging

logger = logging.getLogger("run_dev")


def main() -> None:
    configure_logging()
    base = f"http://{settings.HOST}:{settings.PORT}"
    logger.info("%s %s (debug=%s)", settings.PROJECT_NAME, settings.VERSION, settings.DEBUG)
    logger.info("Decisions: %s%s/decisions", base, settings.API_PREFIX)
    logger.info("Docs: %s/docs", base)

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,
        reload_dirs=[str(project_root / "app")],
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
