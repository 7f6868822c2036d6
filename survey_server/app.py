"""
Rider Survey Engagement API: FastAPI app factory.

Use: uvicorn survey_server.app:app
Or:  from survey_server import app
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_config
from .routes import register_routes
from .state import get_state

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, routes, and startup."""
    config = get_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    app = FastAPI(
        title="Rider Survey Engagement API",
        description="Decides whether and which in-app survey to show a rider",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)

    @app.on_event("startup")
    def check_config():
        ok, errors = config.validate()
        for err in errors:
            logger.warning("[startup] %s", err)
        get_state()

    return app


app = create_app()
