"""Entry point for running the NiceGUI vector drawing editor."""

from vectordraw.app import run
from vectordraw.logging_config import setup_logging


if __name__ in {"__main__", "__mp_main__"}:
    setup_logging()
    run(reload=False, host="0.0.0.0", port=8080, title="Vector Drawing")
