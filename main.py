import os

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from lifespan import lifespan

from interface.middleware import (
    add_cors_middleware,
    add_request_logging,
    register_exception_handlers,
)
from interface.routers import build_client_router, exercise_router, user_router
from utilities.monitoring import MonitoringFactory
from utils import AppSettings, CorsSettings

logger = MonitoringFactory.get_logger("main")


def create_app(
    app_settings: AppSettings = None,
    cors_settings: CorsSettings = None,
) -> FastAPI:
    """
    Build the Exercise Tracker application.

    Args:
        app_settings: Application settings, read from the environment if omitted
        cors_settings: CORS settings, read from the environment if omitted

    Returns:
        FastAPI: A configured application instance
    """
    app_settings = app_settings or AppSettings()
    cors_settings = cors_settings or CorsSettings()

    app = FastAPI(
        title=app_settings.name,
        version=app_settings.version,
        debug=app_settings.debug_mode,
        lifespan=lifespan
    )

    register_exception_handlers(app)

    # API Routers
    app.include_router(user_router)
    app.include_router(exercise_router)

    # Initialize Limiter
    limiter = Limiter(key_func=get_remote_address, default_limits=[app_settings.rate_limit])
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    @app.get("/ping")
    @limiter.limit("10/second")
    async def ping(request: Request, response: Response):
        """Endpoint to check if the server is alive."""
        return JSONResponse(content={"status": "ok"}, status_code=status.HTTP_200_OK)

    # Client routes catch every remaining path, so they go last
    if app_settings.client_build_dir and os.path.isfile(
        os.path.join(app_settings.client_build_dir, "index.html")
    ):
        app.include_router(build_client_router(app_settings.client_build_dir))
        logger.info(f"Serving client build from {app_settings.client_build_dir}")

    app.add_middleware(SlowAPIMiddleware)
    add_cors_middleware(app, cors_settings)
    add_request_logging(app)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = AppSettings()
    uvicorn.run("main:app", host=settings.host, port=settings.port)
