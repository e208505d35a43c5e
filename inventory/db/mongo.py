# inventory/db/mongo.py
from __future__ import annotations
import logging
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from inventory.core.config import Settings, get_settings
import certifi

logger = logging.getLogger(__name__)

_client: AsyncIOMotorClient | None = None
_db: AsyncIOMotorDatabase | None = None


def get_db() -> AsyncIOMotorDatabase:
    assert _db is not None, "Mongo DB not initialized"
    return _db


def _new_client(settings: Settings) -> AsyncIOMotorClient:
    kwargs = dict(
        uuidRepresentation="standard",
        serverSelectionTimeoutMS=6000,
        connectTimeoutMS=6000,
    )
    if settings.MONGO_TLS:
        # SRV/Atlas: explicit CA bundle, containers often lack one
        kwargs.update(tls=True, tlsCAFile=certifi.where())
    return AsyncIOMotorClient(settings.MONGO_URI, **kwargs)


async def connect(settings: Settings | None = None) -> AsyncIOMotorDatabase:
    """
    Create the Motor client and ping once.
    A failed ping does not abort startup: the client stays lazy and the first
    real query retries the connection.
    """
    global _client, _db
    settings = settings or get_settings()

    _client = _new_client(settings)
    _db = _client[settings.MONGO_DB]
    try:
        await _client.admin.command("ping")
        logger.info("Mongo connected (ping ok) db=%s", settings.MONGO_DB)
    except Exception as e:
        logger.warning("Mongo ping at startup failed, will connect lazily: %s", e)
    return _db


async def disconnect():
    global _client, _db
    if _client:
        _client.close()
    _client = None
    _db = None
