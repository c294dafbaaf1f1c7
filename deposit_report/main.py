"""Application entry point."""

import logging
import uvicorn

from deposit_report.config import Config
from deposit_report.app import create_app

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def main():
    """Run the deposit report API."""
    config = Config.from_env()
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
    
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
