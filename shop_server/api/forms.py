# shop_server/api/forms.py

import json
from typing import TypeVar
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError


M = TypeVar("M", bound=BaseModel)

FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_body(request: Request) -> dict:
    """
    Decodes a request body sent either as JSON or as an HTML form.
    An empty body reads as an empty object.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_TYPES):
        form = await request.form()
        return dict(form)

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        raise RequestValidationError([
            {"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error", "input": {}}
        ])
    if not isinstance(data, dict):
        raise RequestValidationError([
            {"type": "dict_type", "loc": ("body",), "msg": "Input should be an object", "input": data}
        ])
    return data


def body_of(model: type[M]):
    """
    Builds a dependency that validates the JSON or form body into `model`.
    """
    async def dependency(request: Request) -> M:
        data = await read_body(request)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise RequestValidationError(e.errors(include_url=False))

    return dependency
