from interface.di.user_service_di import get_user_usecase
from interface.di.exercise_service_di import get_exercise_usecase
from interface.di.payload_di import get_payload

__all__ = [
    "get_user_usecase",
    "get_exercise_usecase",
    "get_payload",
]
