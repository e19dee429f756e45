"""TennisWorld API: mock tennis HTTP API and MongoDB connectivity probe."""

__version__ = "1.0.0"
