from interface.routers.user_router import user_router
from interface.routers.exercise_router import exercise_router
from interface.routers.client_router import build_client_router

__all__ = ["user_router", "exercise_router", "build_client_router"]
