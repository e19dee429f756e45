"""
Pytest configuration for tennisworld-api tests.

This file ensures that the src directory is in the Python path so that tests
can import from tennisworld_api, and keeps a developer's MONGODB_URI out of
the test run.
"""
import sys
import os
from pathlib import Path

os.environ.pop("MONGODB_URI", None)

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))
