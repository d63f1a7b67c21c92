#!/usr/bin/env python3
"""Run one hide and seek tournament with the live view."""

import sys
from pathlib import Path

from dotenv import load_dotenv

from hideseek_engine.cli import main


def run():
    """Run the tournament over ./players."""
    # Load .env file if it exists
    env_file = Path(__file__).parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)
        print(f"Loaded environment from {env_file}")

    return main(["tournament", *sys.argv[1:]])


if __name__ == "__main__":
    sys.exit(run())
