from contextlib import asynccontextmanager
from fastapi import FastAPI

from infrastructure.database import FirebaseAdminRepository
from infrastructure.di import get_database
from utilities.monitoring import MonitoringFactory

# Setup logger
logger = MonitoringFactory.get_logger("lifespan")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for the FastAPI application.

    Connects to the document store before the first request so that a
    misconfigured store stops the server at startup, and releases the
    store client on shutdown.

    Args:
        app: FastAPI application instance
    """
    try:
        logger.info("Connecting to the document store...")
        app.state.database = get_database()
        logger.info("Document store connected")
    except Exception as e:
        logger.error(f"Error connecting to the document store: {e}")
        raise

    yield  # Application runs here

    logger.info("Closing the document store connection...")
    database = app.state.database
    if isinstance(database, FirebaseAdminRepository):
        database.close()
    logger.info("Document store connection closed")
