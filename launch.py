"""
ReefHeat - Server Launcher

Starts the Streamlit dashboard bound to 0.0.0.0 on ``$PORT`` (default 8080).

Usage: python launch.py
"""

import logging
import sys
from pathlib import Path

from streamlit.web import cli as stcli

from config.settings import configure_logging, proxy_url, server_port

logger = logging.getLogger("reefheat.launch")

APP_PATH = Path(__file__).resolve().parent / "app.py"


def build_argv(port: int, address: str = "0.0.0.0") -> list:
    return [
        "streamlit", "run", str(APP_PATH),
        "--server.port", str(port),
        "--server.address", address,
        "--server.headless", "true",
    ]


def main() -> int:
    configure_logging()

    proxy = proxy_url()
    if proxy:
        logger.info("Using proxy from REEFHEAT_PROXY_URL: %s", proxy)
    else:
        logger.info("No proxy found in environment variable REEFHEAT_PROXY_URL")

    port = server_port()
    logger.info("Website launching at: http://0.0.0.0:%d/", port)

    sys.argv = build_argv(port)
    return stcli.main()


if __name__ == "__main__":
    sys.exit(main())
