#!/usr/bin/env python3
"""Run the CMS HTTP server."""

import logging
import sys
from pathlib import Path

from cms.config import get, load_config
from cms.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main():
    """Run the API server."""
    config_path = Path(__file__).parent / "config" / "config.yaml"

    if not config_path.exists():
        print("Error: config/config.yaml not found")
        print("Copy config/config.example.yaml to config/config.yaml and configure it")
        sys.exit(1)

    load_config(str(config_path))
    setup_logging()

    host = get("api.host", "127.0.0.1")
    port = get("api.port", 8000)

    logger.info(f"Starting CMS on {host}:{port}")
    logger.info("API documentation available at:")
    logger.info(f"  - Swagger UI: http://{host}:{port}/docs")
    logger.info(f"  - ReDoc: http://{host}:{port}/redoc")

    # Import here so the config is loaded before the application boots
    import uvicorn
    from cms.api import create_app

    uvicorn.run(
        create_app(),
        host=host,
        port=port,
        log_level="info",
        access_log=True,
    )


if __name__ == "__main__":
    main()
