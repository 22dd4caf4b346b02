"""
Entry point for the Employee Records Backend
Runs the API server, or with --web the standalone development web client
"""

import argparse
import sys
import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from records_backend.app import create_app, create_web_app
from records_backend.config.settings import Settings

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Employee Records Backend")
    parser.add_argument("--web", action="store_true", help="run the standalone web client instead of the API")
    parser.add_argument("--host", default="0.0.0.0")
    args = parser.parse_args(argv)

    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
    settings = Settings.from_env()

    import uvicorn
    if args.web:
        logger.info(f"Starting web client on port {settings.web_port}, API at {settings.api_url}")
        uvicorn.run(create_web_app(settings), host=args.host, port=settings.web_port)
    else:
        logger.info(f"Starting Employee Records Backend on port {settings.port} ({settings.env})")
        uvicorn.run(create_app(settings), host=args.host, port=settings.port)


if __name__ == "__main__":
    main()
