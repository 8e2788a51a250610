"""Run the café directory API with uvicorn.

Usage:
    python -m cafe_api

Host and port come from ``CAFE_API_HOST`` / ``CAFE_API_PORT``.
"""
import logging
import os

import uvicorn


def main() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    uvicorn.run(
        "cafe_api.app:app",
        host=os.getenv("CAFE_API_HOST", "127.0.0.1"),
        port=int(os.getenv("CAFE_API_PORT", "8000")),
    )


if __name__ == "__main__":
    main()
