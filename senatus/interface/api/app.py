"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from senatus.config import Settings
from senatus.interface.api.routes import health, me, questions, topics, votes
from senatus.util.di.container import create_container, setup_di
from senatus.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Senatus API",
        description="Community Q&A board: topics, questions and votes",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(me.router)
    app_instance.include_router(topics.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(votes.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
