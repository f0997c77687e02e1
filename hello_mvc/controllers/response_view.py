"""
Response View Controller

Three ways to hand a logical view name and a model to the view layer.
All of them render templates/response/hello.html.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from hello_mvc.views import (
    Model,
    ModelAndView,
    get_model,
    render,
    render_model_and_view,
    view_name_from_path,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["response-view"], default_response_class=HTMLResponse)

METHODS = ["GET", "POST"]


@router.api_route("/response-view-v1", methods=METHODS)
def response_view_v1(request: Request):
    mav = ModelAndView("response/hello").add_object("data", "hello!")
    return render_model_and_view(request, mav)


@router.api_route("/response-view-v2", methods=METHODS)
def response_view_v2(request: Request, model: Model = Depends(get_model)):
    model.add_attribute("data", "hello!")
    return render(request, "response/hello", model)


@router.api_route("/response/hello", methods=METHODS)
def response_view_v3(request: Request, model: Model = Depends(get_model)):
    """
    The view name is taken from the request path: /response/hello
    renders response/hello. It only works while path and template line
    up, so prefer naming the view explicitly.
    """
    model.add_attribute("data", "hello!")
    return render(request, view_name_from_path(request.url.path), model)
