"""
Start script for the validation API (uvicorn).

Usage:
    uv run python main.py
    uv run python main.py --port 8080 --log-level debug
    uv run python main.py --tax-office-file ./finanzaemter.txt
"""

from __future__ import annotations

import argparse
import logging
import os

import uvicorn

_LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def main() -> None:
    parser = argparse.ArgumentParser(description="Start the preset-validation API")
    parser.add_argument("--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    parser.add_argument(
        "--reload", action="store_true", help="Enable auto-reload on code changes"
    )
    parser.add_argument(
        "--workers", type=int, default=1, help="Number of worker processes (default: 1)"
    )
    parser.add_argument(
        "--tax-office-file",
        help="Alternative tax office registry (sets TAX_OFFICE_FILE)",
    )
    parser.add_argument(
        "--log-level", choices=_LOG_LEVELS, default="info", help="Log level (default: info)"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.tax_office_file:
        # Read by api.main at startup, also inside reload/worker subprocesses
        os.environ["TAX_OFFICE_FILE"] = os.path.abspath(args.tax_office_file)

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=args.workers if not args.reload else 1,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
