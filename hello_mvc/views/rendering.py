"""
View resolution and rendering.

A logical view name maps to "<name>.html" inside the templates directory.
Rendering itself is left to Jinja2 through Starlette's template response.
"""

import logging
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from hello_mvc.config import get_settings

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".html"

templates = Jinja2Templates(directory=get_settings().templates_dir)


class Model(dict):
    """Attributes exposed to a template, filled in by the controller."""

    def add_attribute(self, name: str, value: Any) -> "Model":
        self[name] = value
        return self


class ModelAndView:
    """A logical view name together with the model it renders."""

    def __init__(self, view_name: str, model: dict | None = None):
        self.view_name = view_name
        self.model = Model(model or {})

    def add_object(self, name: str, value: Any) -> "ModelAndView":
        self.model.add_attribute(name, value)
        return self

    def __repr__(self) -> str:
        return f"ModelAndView(view_name={self.view_name!r}, model={dict(self.model)!r})"


def get_model() -> Model:
    """Dependency providing an empty, request-scoped model."""
    return Model()


def resolve_view(view_name: str) -> str:
    """Map a logical view name to a template path relative to the templates dir."""
    name = view_name.strip("/")
    if not name:
        raise ValueError("View name must not be empty")
    if name.endswith(TEMPLATE_SUFFIX):
        return name
    return name + TEMPLATE_SUFFIX


def view_name_from_path(path: str) -> str:
    """Derive a logical view name from a request path: /response/hello -> response/hello."""
    return path.strip("/")


def render(
    request: Request,
    view_name: str,
    model: dict | None = None,
    status_code: int = 200,
) -> Response:
    """Render the template a logical view name resolves to."""
    template = resolve_view(view_name)
    logger.debug(f"Rendering view {view_name} -> {template}")
    return templates.TemplateResponse(
        request,
        template,
        dict(model or {}),
        status_code=status_code,
    )


def render_model_and_view(request: Request, mav: ModelAndView) -> Response:
    return render(request, mav.view_name, mav.model)
