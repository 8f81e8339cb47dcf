import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from blogforge.core.config import FRONTEND_URL, FRONTEND_URL_PROD, LOG_LEVEL, STORAGE_BACKEND
from blogforge.routes.articles import limiter
from blogforge.routes.articles import router as articles_router
from blogforge.routes.blogs import router as blogs_router
from blogforge.routes.users import router as users_router
from blogforge.services.article_store import ArticleStore, build_article_store
from blogforge.services.generation_client import TextGenerator

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def create_app(
    generator: Optional[TextGenerator] = None,
    article_store: Optional[ArticleStore] = None,
) -> FastAPI:
    """Composition root.

    The generator and the store are owned by the app and handed to routes
    through dependencies. When no generator is given, an OpenAI-backed one
    is created on the first generation request.
    """
    app = FastAPI(
        title="BlogForge Backend",
        version="1.0.0"
    )

    # -------------------------------------------------
    # Rate limiter
    # -------------------------------------------------
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # -------------------------------------------------
    # Collaborators
    # -------------------------------------------------
    app.state.generator = generator
    app.state.article_store = article_store or build_article_store(STORAGE_BACKEND)

    # -------------------------------------------------
    # CORS settings
    # -------------------------------------------------
    allowed_origins = [origin for origin in (FRONTEND_URL, FRONTEND_URL_PROD) if origin]
    allowed_origins.append("http://localhost:3000")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # -------------------------------------------------
    # Register Routers
    # -------------------------------------------------
    app.include_router(articles_router)
    app.include_router(blogs_router)
    app.include_router(users_router)

    # -------------------------------------------------
    # Health Check
    # -------------------------------------------------
    @app.get("/")
    def root():
        return {
            "status": "ok",
            "message": "BlogForge Backend is running!"
        }

    return app


app = create_app()
