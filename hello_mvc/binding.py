"""
Request parameter access for handlers that work below FastAPI's own binding.

request_parameters merges the query string with a submitted form body,
so a handler sees "username" the same whether it came from
?username=... or from <form method="post">.
"""

import logging
from typing import Any, Callable

from fastapi import Request
from pydantic import BaseModel, ValidationError
from starlette.datastructures import MultiDict

from hello_mvc.errors import BindingError, MissingParameterError

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def request_parameters(request: Request) -> MultiDict:
    """Query parameters followed by form fields, all values kept."""
    items = list(request.query_params.multi_items())

    content_type = request.headers.get("content-type", "")
    if request.method == "POST" and content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        items.extend(
            (key, value) for key, value in form.multi_items() if isinstance(value, str)
        )

    return MultiDict(items)


def to_int(name: str, raw: str | None) -> int:
    """Convert a raw parameter to int, failing with a BindingError."""
    if raw is None:
        raise MissingParameterError(name, "int")
    try:
        return int(raw)
    except ValueError:
        raise BindingError(name, raw, "int")


class RequestParam:
    """
    Dependency reading one named parameter from query or form.

    A default_value also replaces a parameter that is present but blank,
    which FastAPI's Query defaults do not do.
    """

    def __init__(
        self,
        name: str,
        converter: Callable[[str], Any] = str,
        required: bool = True,
        default_value: str | None = None,
    ):
        self.name = name
        self.converter = converter
        self.required = required
        self.default_value = default_value

    async def __call__(self, request: Request) -> Any:
        params = await request_parameters(request)
        raw = params.get(self.name)

        if self.default_value is not None and not raw:
            raw = self.default_value
        # A blank value binds no number, the same as a missing one
        if raw == "" and self.converter is not str:
            raw = None
        if raw is None:
            if self.required:
                raise MissingParameterError(self.name, self.converter.__name__)
            return None

        if self.converter is int:
            return to_int(self.name, raw)
        try:
            return self.converter(raw)
        except (TypeError, ValueError):
            raise BindingError(self.name, raw, self.converter.__name__)


class ModelAttribute:
    """
    Dependency building a pydantic model from request parameters.

    Each parameter whose name matches a model field is bound to it.
    Parameters with no matching field are ignored.
    """

    def __init__(self, model: type[BaseModel]):
        self.model = model

    async def __call__(self, request: Request) -> BaseModel:
        params = await request_parameters(request)
        values = {
            name: params[name]
            for name in self.model.model_fields
            if name in params
        }

        try:
            return self.model.model_validate(values)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(loc) for loc in first["loc"])
            logger.debug(f"Binding {self.model.__name__} failed: {e}")
            raise BindingError(field, values.get(field), first["type"])
