import logging

# Log configuration (before other imports)
# ruff: noqa: E402
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)

from typing import Optional  # noqa: E402

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from logidesk.api.base import api_router  # noqa: E402
from logidesk.container import ServiceContainer, build_container  # noqa: E402


def create_app(container: Optional[ServiceContainer] = None) -> FastAPI:
    app = FastAPI(
        title="Logidesk Backend API",
        description="Backend API for Logidesk - task timing and AI assistant for logistics teams",
        version="1.0.0"
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Specify your frontend URL in production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.container = container or build_container()

    # Include all API routes
    app.include_router(api_router)

    @app.get("/")
    def read_root():
        return {
            "message": "Logidesk Backend API",
            "docs": "/docs",
            "version": "1.0.0"
        }

    return app


app = create_app()
