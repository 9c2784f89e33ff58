import json
from typing import Any, Awaitable, Callable, Dict, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel

from core.exceptions import ValidationError

T = TypeVar("T", bound=BaseModel)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def _read_payload(request: Request) -> Dict[str, Any]:
    """
    Read a request body sent either as a form or as a JSON object.

    An empty body reads as an empty payload so that missing fields are
    reported by the use case rather than as a parse error.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    body = await request.body()
    if not body.strip():
        return {}

    try:
        payload = json.loads(body)
    except ValueError:
        raise ValidationError("Request body must be a JSON object or form data")

    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object or form data")
    return payload


def get_payload(schema: Type[T]) -> Callable[[Request], Awaitable[T]]:
    """
    Build a dependency that parses the request body into ``schema``.

    Args:
        schema: Pydantic model with lenient fields

    Returns:
        An async dependency returning the parsed payload
    """
    async def dependency(request: Request) -> T:
        return schema.model_validate(await _read_payload(request))

    return dependency
