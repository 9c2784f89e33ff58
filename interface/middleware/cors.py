from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from utils import CorsSettings


def add_cors_middleware(app: FastAPI, cors_settings: CorsSettings) -> None:
    """Allow the browser client to call the API from another origin."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_settings.allowed_origins,
        allow_methods=cors_settings.allowed_methods,
        allow_headers=cors_settings.allowed_headers,
        allow_credentials=cors_settings.allow_credentials,
        expose_headers=cors_settings.expose_headers,
        max_age=600,
    )
