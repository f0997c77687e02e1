"""
hello-mvc - Application Entry Point

Architecture Overview:
=====================
- Models (hello_mvc/models/): HelloData binding holder, Item entity and schemas
- Views (hello_mvc/views/): Jinja2 templates plus view name resolution
- Controllers (hello_mvc/controllers/): one router per example area
  - request_param.py, request_header.py, request_body.py: reading requests
  - mapping.py: path composition, verbs and mapping conditions
  - response_body.py, response_view.py: building responses
  - items.py, basic_items.py: item service as JSON API and HTML pages
- Repositories (hello_mvc/repositories/): data access for items

Run with: uvicorn hello_mvc.main:app --reload
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from hello_mvc import __version__
from hello_mvc.config import get_settings
from hello_mvc.controllers import (
    basic_items_router,
    items_router,
    mapping_router,
    mapping_users_router,
    request_body_router,
    request_header_router,
    request_param_router,
    response_body_router,
    response_view_router,
)
from hello_mvc.controllers.basic_items import init_items
from hello_mvc.database import SessionLocal, init_db
from hello_mvc.errors import register_error_handlers
from hello_mvc.observability import setup_logging

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_format)
    init_db()

    if settings.seed_items:
        db = SessionLocal()
        try:
            init_items(db)
        finally:
            db.close()

    logger.info(f"{settings.app_name} {__version__} started")
    yield
    logger.info(f"{settings.app_name} shutting down")


app = FastAPI(
    title="hello-mvc",
    description="""
    Web controller examples.

    ## Features
    - Request parameter, header and body binding
    - Request mapping: prefixes, verbs, path variables, conditions
    - Response bodies (text, JSON) and rendered views
    - A small item service with JSON API and HTML pages
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# /mapping/users must be registered before /mapping/{userId}
app.include_router(mapping_users_router)
app.include_router(mapping_router)
app.include_router(request_param_router)
app.include_router(request_header_router)
app.include_router(request_body_router)
app.include_router(response_body_router)
app.include_router(response_view_router)
app.include_router(items_router)
app.include_router(basic_items_router)


# ============================================
# Health Check Endpoints
# ============================================

@app.get("/health", tags=["health"])
def health_check():
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": __version__,
    }


# ============================================
# Static Resources
# ============================================

if os.path.exists(settings.static_dir):
    app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")


@app.get("/", tags=["views"], include_in_schema=False)
def index():
    """Static index page linking to the examples."""
    return FileResponse(os.path.join(settings.static_dir, "index.html"))
