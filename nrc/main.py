"""
Main FastAPI application entry point.
Configures the application, middleware, and includes routers.
"""
from dotenv import load_dotenv

# Load environment variables from .env file first
load_dotenv()

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional
import logging

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .config import Settings, settings as default_settings
from .database import Database, get_db
from .exceptions import register_exception_handlers
from .core.middleware import setup_middlewares
from .core.bootstrap import seed_sample_data
from .patients.router import router as patients_router
from .beds.router import router as beds_router, hospitals_router
from .bed_requests.router import router as bed_requests_router
from .medical_records.router import router as medical_records_router
from .visits.router import router as visits_router
from .workers.router import router as workers_router
from .anganwadis.router import router as anganwadis_router
from .notifications.router import router as notifications_router

logger = logging.getLogger(__name__)


def configure_logging(app_settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, app_settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and seed sample data on startup; release the engine on shutdown."""
    database: Database = app.state.database
    logger.info("🚀 Starting NRC Management API...")
    database.create_tables()
    if app.state.settings.seed_sample_data:
        db = database.session()
        try:
            seed_sample_data(db)
        finally:
            db.close()
    yield
    database.dispose()
    logger.info("NRC Management API stopped")


def create_app(app_settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to use, defaults to the environment settings
        database: Storage to use, defaults to one built from app_settings.database_url

    Returns:
        FastAPI: Configured application
    """
    app_settings = app_settings or default_settings
    configure_logging(app_settings)

    app = FastAPI(
        title="NRC Management API",
        description="API for the Nutrition Rehabilitation Center management dashboard",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = app_settings
    app.state.database = database or Database(app_settings.database_url)

    # Register exception handlers
    register_exception_handlers(app)

    # Configure CORS middleware
    origins = [app_settings.frontend_url, *app_settings.cors_origins]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup custom middleware
    setup_middlewares(app)

    # Include routers
    prefix = app_settings.api_prefix
    app.include_router(patients_router, prefix=f"{prefix}/patients", tags=["Patients"])
    app.include_router(hospitals_router, prefix=f"{prefix}/hospitals", tags=["Beds"])
    app.include_router(beds_router, prefix=f"{prefix}/beds", tags=["Beds"])
    app.include_router(bed_requests_router, prefix=f"{prefix}/bed-requests", tags=["Bed Requests"])
    app.include_router(medical_records_router, prefix=f"{prefix}/medical-records", tags=["Medical Records"])
    app.include_router(visits_router, prefix=f"{prefix}/visits", tags=["Visits"])
    app.include_router(workers_router, prefix=f"{prefix}/workers", tags=["Workers"])
    app.include_router(anganwadis_router, prefix=f"{prefix}/anganwadis", tags=["Anganwadis"])
    app.include_router(notifications_router, prefix=f"{prefix}/notifications", tags=["Notifications"])

    @app.get("/")
    def root():
        """
        Root endpoint.

        Returns:
            dict: Simple welcome message
        """
        return {"message": "Welcome to NRC Management API", "version": app.version}

    @app.get("/health")
    def health_check(db: Session = Depends(get_db)):
        """
        Health check endpoint for monitoring.

        Returns:
            dict: Health status information
        """
        try:
            db.execute(text("SELECT 1"))
            database_status = "connected"
        except SQLAlchemyError as e:
            logger.error(f"Health check database probe failed: {str(e)}")
            database_status = "unavailable"
        return {
            "status": "healthy" if database_status == "connected" else "degraded",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "database": database_status
        }

    return app


app = create_app()
