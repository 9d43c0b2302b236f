"""
API module - FastAPI routers, endpoint definitions and shared dependencies.

Usage:
    from vahub.api.routes import api_router
    app.include_router(api_router, prefix="/api")
"""
