from __future__ import annotations

import logging

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from endpoints.models import ErrorResponse
from persistence import AsyncDiskResourceRepository, StoreError, initialize_store
from settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    if settings is None:
        load_dotenv("local.env")
        settings = get_settings()

    from endpoints.api_endpoints import router as api_router

    # The data file must exist (or have failed to seed) before the store handle is built.
    db_file = initialize_store(settings)

    app = FastAPI(title="POS shared datastore")
    app.state.settings = settings
    app.state.repo = AsyncDiskResourceRepository(db_file)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        return JSONResponse(ErrorResponse(error=exc.message).model_dump(), status_code=404)

    @app.get("/")
    async def root():
        return JSONResponse(
            {
                "name": settings.app_name,
                "status": "ok",
                "data_file": str(db_file),
            }
        )

    app.include_router(api_router)

    return app


def main() -> None:
    load_dotenv("local.env")
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(settings)
    logger.info("API server listening on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
