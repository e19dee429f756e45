# Core shared modules for the API server and the store commands
from .config import Config, setup_logging, mask_connection_string

__all__ = [
    "Config",
    "setup_logging",
    "mask_connection_string",
]
