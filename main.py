#!/usr/bin/env python3
"""
Oracle - Entry point for running the API server.

Usage:
    python main.py                  # Serve on the configured host/port
    python main.py --port 9000      # Override the port
    python main.py --static         # Serve static figures only (no yfinance calls)
"""

import argparse
import logging
import os

import uvicorn

from oracle.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Oracle Portfolio API")
    parser.add_argument("--host", default=settings.host, help="Web server host")
    parser.add_argument("--port", type=int, default=settings.port, help="Web server port")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    parser.add_argument("--static", action="store_true", help="Disable live market data")
    args = parser.parse_args()

    if args.static:
        # The env var covers reload subprocesses, which build their own Settings
        os.environ["ORACLE_LIVE_MARKET_DATA"] = "false"
        settings.live_market_data = False

    logger.info(f"Running web server on {args.host}:{args.port}")
    uvicorn.run(
        "oracle.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
