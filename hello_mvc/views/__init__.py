"""
Views Package - The 'V' in MVC

This package contains all view-related code:
- Jinja2 templates under templates/
- ModelAndView and Model, the holders controllers hand to the view layer
- Logical view name resolution and rendering

Controllers never build template paths themselves. They return a logical
view name such as "response/hello", which resolves to
templates/response/hello.html.
"""

from hello_mvc.views.rendering import (
    Model,
    ModelAndView,
    get_model,
    render,
    render_model_and_view,
    resolve_view,
    templates,
    view_name_from_path,
)

__all__ = [
    "Model",
    "ModelAndView",
    "get_model",
    "render",
    "render_model_and_view",
    "resolve_view",
    "templates",
    "view_name_from_path",
]
