import asyncio
import os
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI
from sentry_sdk.integrations.starlette import StarletteIntegration
from starlette.middleware.cors import CORSMiddleware

from calles.api import errors
from calles.api.routers.commands import router as commands_router
from calles.api.routers.healthz import router as healthz_router
from calles.api.routers.readyz import router as readyz_router
from calles.api.routers.streets import router as streets_router
from calles.api.routers.suggest import router as suggest_router
from calles.core.config import Settings
from calles.logging import get_logger, setup_logging
from calles.middleware.request_id import request_id_middleware
from calles.middleware.security_headers import security_headers_middleware
from calles.services.loader import DatasetHolder, StreetMap


def _init_sentry(env: str) -> None:
    dsn = os.getenv("SENTRY_DSN")
    if not dsn:
        return
    # traces_sample_rate: clamp to [0.0, 0.2]
    try:
        rate_raw = float(os.getenv("SENTRY_TRACES_RATE", "0"))
    except ValueError:
        rate_raw = 0.0
    sentry_sdk.init(
        dsn=dsn,
        environment=env,
        release=os.getenv("RELEASE"),
        integrations=[StarletteIntegration()],
        traces_sample_rate=max(0.0, min(0.2, rate_raw)),
        send_default_pii=False,
    )


def create_app(settings: Settings | None = None, street_map: StreetMap | None = None) -> FastAPI:
    """Build the API.

    Without a prebuilt ``street_map`` the datasets are loaded by a background task
    started from the lifespan; until it finishes every endpoint sees an empty map.
    """
    setup_logging()

    env = os.getenv("APP_ENV", "dev")
    _init_sentry(env)

    settings = settings or Settings()
    holder = DatasetHolder(street_map)
    logger = get_logger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        task: asyncio.Task | None = None
        if street_map is None:
            task = asyncio.create_task(holder.load(settings))
        try:
            yield
        finally:
            if task is not None and not task.done():
                task.cancel()

    app = FastAPI(title="Calles de Buenos Aires", lifespan=lifespan)
    app.state.settings = settings
    app.state.dataset = holder

    app.middleware("http")(request_id_middleware)
    app.middleware("http")(security_headers_middleware)

    # CORS from ALLOW_ORIGINS env (comma-separated)
    allow_origins = [o.strip() for o in os.getenv("ALLOW_ORIGINS", "").split(",") if o.strip()]
    if allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allow_origins,
            allow_credentials=False,
            allow_methods=["GET", "POST", "OPTIONS", "HEAD"],
            allow_headers=["*"],
        )

    errors.install(app)
    app.include_router(streets_router)
    app.include_router(suggest_router)
    app.include_router(commands_router)
    app.include_router(healthz_router)
    app.include_router(readyz_router)

    if env != "prod":

        @app.get("/debug/error")
        def debug_error():
            raise RuntimeError("intentional error for Sentry debug")

    logger.info("app_startup", env=env, dataset_preloaded=street_map is not None)
    return app


app = create_app()
