"""
Peoplebook command line.
Run: python -m cli (from repo root, with .env or env vars set).
"""

import logging

from cli.main import app
from peoplebook.config import load_settings

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, load_settings().log_level, logging.INFO),
)

if __name__ == "__main__":
    app(prog_name="peoplebook")
