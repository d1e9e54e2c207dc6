"""Error handlers mapping estimator failures onto HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from postframe.core.errors import InvalidSpec, OpeningOutOfBounds


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(InvalidSpec)
    async def invalid_spec_handler(request: Request, exc: InvalidSpec) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid building spec",
                "error_type": "invalid_spec",
                "details": [{"message": p} for p in exc.problems],
            },
        )

    @app.exception_handler(OpeningOutOfBounds)
    async def opening_out_of_bounds_handler(
        request: Request, exc: OpeningOutOfBounds
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "opening_out_of_bounds",
                "details": [{"opening_id": exc.opening_id, "wall": exc.wall, "span": exc.span}],
            },
        )
