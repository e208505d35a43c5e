# inventory/core/lifespan.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from pymongo.errors import PyMongoError
from inventory.db import mongo
from inventory.core.config import get_settings
from inventory.domain.repositories.product_repo import ProductRepo
from inventory.domain.repositories.user_repo import UserRepo

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # --- Startup ---
    db = await mongo.connect(settings)

    # Unique sku / email / username indexes back the service-level checks
    try:
        await ProductRepo(db).ensure_indexes()
        await UserRepo(db).ensure_indexes()
        logger.info("Mongo indexes ensured")
    except PyMongoError as e:
        # no serving without the unique sku index
        logger.error("Index creation failed, aborting startup: %s", e)
        await mongo.disconnect()
        raise

    yield

    # --- Shutdown ---
    await mongo.disconnect()
    logger.info("Mongo disconnected")
