"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from postframe.api.exceptions import register_exception_handlers
from postframe.api.routes import router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Post-Frame Building Estimator",
        description="Parametric post-frame building generator, takeoff and pricing",
        version="0.1.0",
    )

    # CORS: allow the estimating UI dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(router, prefix="/api")

    return app


app = create_app()
