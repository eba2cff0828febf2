from contextlib import asynccontextmanager
from datetime import datetime
import logging
import os

from dotenv import load_dotenv

load_dotenv()
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import models  # noqa: F401  registers every table on Base.metadata
from database import Base, build_engine, build_session_factory, get_db
from exceptions import InternalError, setup_exception_handlers
import routers.alerts as alerts
import routers.products as products

LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "true").lower() == "true"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CREATE_TABLES_ON_STARTUP = os.getenv("CREATE_TABLES_ON_STARTUP", "true").lower() == "true"

logger = logging.getLogger(__name__)


def configure_logging():
    """Root logger writes to the console and, unless disabled, a per-run log file."""
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handlers = [console_handler]

    if LOG_TO_FILE:
        os.makedirs(LOG_DIR, exist_ok=True) # Create the log directory if it doesn't exist
        # Create a unique log file name based on current date/time
        current_time_str = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        file_handler = logging.FileHandler(os.path.join(LOG_DIR, f"app_{current_time_str}.log"), mode='a')
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, handlers=handlers)


def get_allowed_origins():
    allowed_origins_str = os.getenv(
        "CORS_ALLOWED_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000"
    )
    # Split the string into a list, stripping any whitespace
    return [origin.strip() for origin in allowed_origins_str.split(',') if origin.strip()]


def create_app(database_url: str = None, engine: Engine = None) -> FastAPI:
    """
    Build the API application.

    The engine (and its connection pool) is created here, or passed in by the
    caller, and shared with request handlers through app.state. An engine
    created here is disposed when the application shuts down.
    """
    owns_engine = engine is None
    if owns_engine:
        engine = build_engine(database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application starting up...")
        if CREATE_TABLES_ON_STARTUP:
            # Create database tables
            Base.metadata.create_all(bind=engine)
            logger.info("Database schema initialized")
        yield
        if owns_engine:
            engine.dispose()
        logger.info("Application shut down")

    app = FastAPI(
        title="Inventory Management API",
        version="1.0.0",
        description="Products, warehouse stock and low stock alerts for companies",
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # Enable CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_allowed_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(products.router, prefix="/api")
    app.include_router(alerts.router, prefix="/api")

    @app.get("/")
    async def root():
        return {"message": "Welcome to the Inventory Management API"}

    @app.get("/health")
    def health(db: Session = Depends(get_db)):
        try:
            db.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.exception("Health check could not reach the database")
            raise InternalError() from exc
        return {"status": "ok"}

    return app


configure_logging()
app = create_app()
