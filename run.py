#!/usr/bin/env python3
"""
Run the TennisWorld API server.

Usage:
    python run.py

    # or with venv
    .venv/Scripts/python run.py

Settings come from the environment or a .env file (PORT, HOST, LOG_LEVEL).
"""
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))


if __name__ == "__main__":
    from tennisworld_api.main import main
    main()
