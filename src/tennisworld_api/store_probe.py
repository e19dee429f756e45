"""
MongoDB Store Probe

Verifies connectivity to the MongoDB document store by running one fixed
sequence against tennisworld.players:

    connect -> insert sample player -> find by player_id -> delete by player_id

The client is released exactly once on every path. Errors after the client is
created are logged and recorded on the result, never raised; the caller is an
operator reading console output.
"""

import logging
import traceback
from contextlib import closing
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from pymongo import MongoClient
from pymongo.errors import InvalidOperation, OperationFailure

from .core import mask_connection_string

logger = logging.getLogger(__name__)

DATABASE_NAME = "tennisworld"
COLLECTION_NAME = "players"

SAMPLE_PLAYER = {
    "player_id": 1,
    "player_name": "Novak Djokovic",
    "country": "SRB",
    "type": "ATP",
    "rank": 1,
    "points": 11245,
    "movement": 0,
}


@dataclass
class ProbeResult:
    """Outcome of a single probe run"""
    connected: bool = False
    inserted_id: Optional[str] = None
    found_player: Optional[Dict[str, Any]] = None
    deleted_count: int = 0
    error: Optional[Exception] = None
    closed: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


def _log_error(heading: str, error: Exception):
    logger.error(heading)
    logger.error(f"Error name: {type(error).__name__}")
    logger.error(f"Error message: {error}")
    logger.error(f"Error stack: {traceback.format_exc()}")


class StoreProbe:
    """Run the insert/find/delete sequence against one MongoDB connection."""

    def __init__(self, mongodb_uri: str, client_factory: Callable[..., Any] = MongoClient):
        """
        Args:
            mongodb_uri: MongoDB connection string
            client_factory: Callable building a client from the URI (MongoClient by default)
        """
        self.mongodb_uri = mongodb_uri
        self.client_factory = client_factory

    def run(self) -> ProbeResult:
        result = ProbeResult()
        logger.info(f"Using connection string: {mask_connection_string(self.mongodb_uri)}")

        try:
            client = self.client_factory(self.mongodb_uri)
        except Exception as e:
            # Unparseable URI: no client exists, so there is nothing to close
            _log_error("Error connecting to MongoDB:", e)
            result.error = e
            return result

        with closing(client):
            try:
                self._run_sequence(client, result)
            except Exception as e:
                _log_error("Error connecting to MongoDB:", e)
                result.error = e

        result.closed = True
        logger.info("Connection closed")
        return result

    def _run_sequence(self, client, result: ProbeResult):
        logger.info("Connecting to MongoDB...")
        client.admin.command("ping")
        result.connected = True
        logger.info("Connected successfully to MongoDB")

        collection = client[DATABASE_NAME][COLLECTION_NAME]

        # insert_one adds _id to the document it is given
        logger.info("Inserting sample player...")
        insert_result = collection.insert_one(dict(SAMPLE_PLAYER))
        result.inserted_id = str(insert_result.inserted_id)
        logger.info(f"Inserted sample player with ID: {result.inserted_id}")

        logger.info("Finding the inserted player...")
        result.found_player = collection.find_one({"player_id": SAMPLE_PLAYER["player_id"]})
        logger.info(f"Found player: {result.found_player}")

        logger.info("Deleting the sample player...")
        delete_result = collection.delete_one({"player_id": SAMPLE_PLAYER["player_id"]})
        result.deleted_count = delete_result.deleted_count
        logger.info("Sample player deleted")


def _connected_host(client) -> str:
    """Host of the server the client talks to, or a comma list of known nodes"""
    try:
        address = client.address
    except InvalidOperation:
        # Load-balanced across several mongos routers: no single address
        address = None
    if address:
        return address[0]
    nodes = sorted(host for host, _port in client.nodes)
    return ", ".join(nodes) if nodes else "unknown"


def check_connection(mongodb_uri: str, client_factory: Callable[..., Any] = MongoClient) -> bool:
    """
    Connect, report the server host and disconnect.

    Returns:
        True if the server answered a ping, False otherwise
    """
    logger.info("Testing MongoDB connection...")
    logger.info(f"Using connection string: {mask_connection_string(mongodb_uri)}")

    try:
        client = client_factory(mongodb_uri)
        with closing(client):
            client.admin.command("ping")
            logger.info(f"MongoDB Connected: {_connected_host(client)}")
        logger.info("Connection closed successfully")
        return True
    except Exception as e:
        _log_error("Error connecting to MongoDB:", e)
        if isinstance(e, OperationFailure):
            logger.error(f"MongoDB Server Error Code: {e.code}")
        return False
