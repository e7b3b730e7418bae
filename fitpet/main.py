from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from fitpet.api.me import router as me_router
from fitpet.api.pets import router as pets_router
from fitpet.api.users import router as users_router
from fitpet.api.workouts import router as workouts_router
from fitpet.api.workouts import user_workouts_router
from fitpet.core.logger import setup_logger
from fitpet.core.settings import Settings
from fitpet.core.settings import settings as default_settings
from fitpet.storage import Storage, create_storage
from fitpet.storage.seed import initialize_storage


def create_app(settings: Settings | None = None, storage: Storage | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings to use; defaults to the environment-loaded settings
        storage: Storage backend to use; built from settings when omitted

    Returns:
        Configured FastAPI application. Storage is seeded in the lifespan.
    """
    settings = settings or default_settings
    setup_logger(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = storage if storage is not None else create_storage(settings)
        default_user = initialize_storage(store, settings)
        app.state.storage = store
        app.state.default_user_id = default_user.id
        logger.info(f"FitPet ready (default user_id={default_user.id})")
        yield
        dispose = getattr(store, "dispose", None)
        if dispose is not None:
            dispose()
        logger.info("FitPet shut down")

    app = FastAPI(title="FitPet", lifespan=lifespan)

    app.include_router(users_router)
    app.include_router(pets_router)
    app.include_router(workouts_router)
    app.include_router(user_workouts_router)
    app.include_router(me_router)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Validation failed for {request.method} {request.url.path}: {len(exc.errors())} error(s)")
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.opt(exception=exc).error(f"Unhandled error for {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests."""
        logger.debug(f"Request: {request.method} {request.url.path}")
        response = await call_next(request)
        logger.debug(f"Response: {response.status_code} for {request.method} {request.url.path}")
        return response

    @app.get("/health")
    def health():
        return {"status": "ok"}

    logger.info("FastAPI application initialized")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("fitpet.main:app", host="0.0.0.0", port=8000)
