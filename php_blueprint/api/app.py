from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from php_blueprint.api import generation_routes, history_routes, spec_routes
from php_blueprint.core.config import CORS_ORIGINS
from php_blueprint.services.session import BlueprintSession, create_session


def create_app(session: Optional[BlueprintSession] = None) -> FastAPI:
    """
    Build the PHP Blueprint API.

    Args:
        session: Session to serve; defaults to one over the configured data
            directory and Gemini
    """
    app = FastAPI(title="PHP Blueprint")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )

    app.state.session = session or create_session()

    app.include_router(spec_routes.router)
    app.include_router(generation_routes.router)
    app.include_router(history_routes.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app
