"""
Local development server for the Linkup search tool.

Run from backend with:
  python scripts/dev_server.py

Requires: LINKUP_API_KEY in env (or .env). PORT defaults to 3000.
"""

import sys

import uvicorn
from dotenv import load_dotenv

from linkup_tool.config import Settings, configure_logging


def main() -> int:
    load_dotenv()
    settings = Settings()
    if not settings.linkup_api_key:
        print("`LINKUP_API_KEY` not set. Please set your Linkup API key.")
        return 1

    configure_logging(settings)
    print(f"Local development server running on port {settings.port}")
    uvicorn.run("linkup_tool.main:app", host=settings.host, port=settings.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
