"""ASGI entrypoint. No business logic; only environment, logging and server startup.

  uvicorn skillboard.main:app
  python -m skillboard.main
"""

from dotenv import load_dotenv

load_dotenv()

import logging

import uvicorn

from skillboard.app import create_app
from skillboard.core.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)

app = create_app(settings)


def main() -> None:
    """Serve the app on HOST:PORT."""
    logging.getLogger(__name__).info("Server starting on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
