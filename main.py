"""FastAPI application for the Blog Associations service.

Wires the REST routers onto one application. The schema itself is owned by
the Alembic migrations (``alembic upgrade head``) and sample rows come from
``python -m infrastructure.seeds``.
"""

import logging

from application.rest.routers.router_authors import router as authors_router
from application.rest.routers.router_health import router as health_router
from application.rest.routers.router_posts import router as posts_router
from application.rest.routers.router_profiles import router as profiles_router
from application.rest.routers.router_tags import router as tags_router
from fastapi import FastAPI

logger = logging.getLogger(__name__)

# FastAPI app
app = FastAPI(
    title="Blog Associations Service",
    description=(
        "Authors, posts, profiles and tags: one-to-many, one-to-one and "
        "many-to-many associations over SQLAlchemy"
    ),
    version="1.0.0",
)

app.include_router(health_router, tags=["health"])
app.include_router(authors_router, tags=["authors"])
app.include_router(posts_router, tags=["posts"])
app.include_router(profiles_router, tags=["profiles"])
app.include_router(tags_router, tags=["tags"])

logger.info("Blog Associations service routers registered")
