"""CLI entry point for launching the API with uvicorn."""

import uvicorn

from taskboard.config import Settings
from taskboard.logging_setup import setup_logging
from taskboard.main import create_app


def main() -> None:
    """Run the development server."""
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
