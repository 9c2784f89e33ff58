import time

from fastapi import FastAPI, Request

from utilities.monitoring import MonitoringFactory

logger = MonitoringFactory.get_logger("network")


def add_request_logging(app: FastAPI) -> None:
    """Log method, path, status and latency of every request."""

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"Method {request.method} | Status: {response.status_code} | "
            f"Endpoint: {request.url.path} | {elapsed_ms:.1f} ms"
        )
        return response
