"""
VA Hub - Main Application

FastAPI backend with:
- SQLite (or any SQLAlchemy URL) for all data
- Schema creation, column migrations and demo seed at startup
- JWT authentication for admin endpoints

Run: uvicorn vahub.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vahub.api.routes import api_router
from vahub.core.config import Settings, get_settings
from vahub.core.logging_config import setup_logging
from vahub.db import Database, init_schema, seed_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema and seed data before serving; release the pool on shutdown."""
    database: Database = app.state.database
    init_schema(database)
    seed_database(database, app.state.settings)
    yield
    database.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title="VA Hub",
        description="""
        Job marketplace for employers and virtual assistants.

        ## Features
        - **Authentication**: local email/password accounts with JWT tokens
        - **Jobs**: posting, admin approval, applications, hiring
        - **Profiles**: VA profiles with skills, company profiles, talent search
        - **Messaging**: direct messages between users
        - **Subscriptions**: Free / PRO / PREMIUM plans
        """,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.database = Database(settings.database_url, echo=settings.debug)

    # CORS middleware (allow all for development)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API routes
    app.include_router(api_router, prefix="/api")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Database reachability."""
        return {
            "status": "healthy",
            "database": "connected" if app.state.database.test_connection() else "disconnected"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("vahub.main:app", host="0.0.0.0", port=8000, reload=get_settings().debug)
