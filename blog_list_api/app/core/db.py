"""
MongoDB integration.

This module creates the process-wide ``MongoClient`` and exposes
accessors for the database and the blogs collection.  The client is
opened once when the application starts, kept on ``app.state`` and
closed on shutdown; request handlers reach it through the
``get_blog_collection`` dependency rather than a module global.
"""

import logging

from fastapi import Request
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from .config import Settings, settings

logger = logging.getLogger(__name__)


def create_client(config: Settings = settings) -> MongoClient:
    """Create a new MongoDB client from ``config``.

    pymongo connects in the background, so this call does not fail
    when the server is down; the first operation will.
    """
    logger.info("Connecting to MongoDB database %r", config.mongodb_db)
    return MongoClient(
        config.mongodb_uri,
        serverSelectionTimeoutMS=config.mongodb_timeout_ms,
    )


def get_database(client: MongoClient, config: Settings = settings) -> Database:
    return client[config.mongodb_db]


def get_collection(client: MongoClient, config: Settings = settings) -> Collection:
    """Return the collection holding blog documents."""
    return get_database(client, config)[config.blogs_collection]


def get_blog_collection(request: Request) -> Collection:
    """FastAPI dependency returning the blogs collection of the running app."""
    return get_collection(request.app.state.mongo_client, request.app.state.settings)
