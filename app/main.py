import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.core.config import Settings, get_settings
from app.core.errors import register_error_handlers
from app.core.logging_middleware import LoggingMiddleware
from app.db.init_db import init_db
from app.db.session import make_engine, make_session_factory
from app.routers.assignments import router as assignments_router
from app.routers.auth import router as auth_router
from app.routers.submissions import router as submissions_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(title="Study Buddy Hub")

    # one engine per app, shared by every request; sessions are per request
    engine = make_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)

    # Middleware
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Liveness check
    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "server is running"

    # Startup event
    @app.on_event("startup")
    def on_startup():
        init_db(engine)

    @app.on_event("shutdown")
    def on_shutdown():
        engine.dispose()

    # Include routers
    app.include_router(assignments_router, tags=["assignments"])
    app.include_router(submissions_router, tags=["submissions"])
    app.include_router(auth_router, tags=["auth"])

    return app


app = create_app()


if __name__ == "__main__":
    port = app.state.settings.PORT
    logger.info("server is running on port %s", port)
    uvicorn.run(app, host="0.0.0.0", port=port)
