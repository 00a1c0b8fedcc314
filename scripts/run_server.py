"""Entrypoint for launching the VectorDraw FastAPI server."""
from __future__ import annotations

import uvicorn

from vectordraw.logging_config import setup_logging


def main() -> None:
    setup_logging()
    uvicorn.run("vectordraw.server.app:app", host="0.0.0.0", port=8000, reload=False)


if __name__ == "__main__":
    main()
