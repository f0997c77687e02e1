"""
Request Parameter Controller

Shows the ways a handler can receive request parameters, from reading
the raw request by hand down to letting FastAPI bind a whole object:

- v1: raw request, manual int conversion, body written into a Response
- v2: a named parameter bound to a differently named argument
- v3: the same binding declared in the argument annotation
- v4: reusable annotated parameter types, nothing declared per argument
- required / default: presence rules and fallback values
- map / multi-map: every parameter at once
- model-attribute: a HelloData object bound from parameters

Every handler answers GET and POST, reads the query string together with
a submitted form body, and returns the text "ok".
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response

from hello_mvc.binding import ModelAttribute, RequestParam, request_parameters, to_int
from hello_mvc.models.schemas import HelloData

logger = logging.getLogger(__name__)

router = APIRouter(tags=["request-param"], default_response_class=PlainTextResponse)

METHODS = ["GET", "POST"]

# Parameter types reused by handlers that declare nothing per argument
UsernameParam = Annotated[str | None, Depends(RequestParam("username", required=False))]
AgeParam = Annotated[int, Depends(RequestParam("age", int))]
HelloDataParams = Annotated[HelloData, Depends(ModelAttribute(HelloData))]


@router.api_route("/request-param-v1", methods=METHODS)
async def request_param_v1(request: Request):
    """
    Read parameters straight off the request.

    Nothing is bound for us here: the handler looks each value up by
    name, converts age itself and writes the body into a Response.
    """
    params = await request_parameters(request)
    username = params.get("username")
    age = to_int("age", params.get("age"))
    logger.info(f"username={username}, age={age}")

    return Response(content="ok", media_type="text/plain")


@router.api_route("/request-param-v2", methods=METHODS)
def request_param_v2(
    member_name: str = Depends(RequestParam("username")),
    member_age: int = Depends(RequestParam("age", int)),
):
    """Bind by explicit parameter name into differently named arguments."""
    logger.info(f"username={member_name}, age={member_age}")
    return "ok"


@router.api_route("/request-param-v3", methods=METHODS)
def request_param_v3(
    username: Annotated[str, Depends(RequestParam("username"))],
    age: Annotated[int, Depends(RequestParam("age", int))],
):
    """Argument names match parameter names, declared once in the annotation."""
    logger.info(f"username={username}, age={age}")
    return "ok"


@router.api_route("/request-param-v4", methods=METHODS)
def request_param_v4(username: UsernameParam, age: AgeParam):
    """
    Reusable annotated parameter types, nothing declared per argument.

    username is optional here and binds None when absent, so
    /request-param-v4?age=5 answers "ok". age still has to be present.
    """
    logger.info(f"username={username}, age={age}")
    return "ok"


@router.api_route("/request-param-required", methods=METHODS)
def request_param_required(
    username: str = Depends(RequestParam("username")),
    age: int | None = Depends(RequestParam("age", int, required=False)),
):
    """
    username is required, age is not.

    ?username= (present but empty) passes as "". Leaving age out, or
    sending it blank, gives None, which is why it is declared int | None.
    """
    logger.info(f"username={username}, age={age}")
    return "ok"


@router.api_route("/request-param-default", methods=METHODS)
def request_param_default(
    username: str = Depends(RequestParam("username", default_value="guest")),
    age: int = Depends(RequestParam("age", int, required=False, default_value="-1")),
):
    """Defaults apply to missing parameters and to blank ones like ?username=."""
    logger.info(f"username={username}, age={age}")
    return "ok"


@router.api_route("/request-param-map", methods=METHODS)
async def request_param_map(request: Request):
    """Collect parameters into a dict. Repeated names keep their first value."""
    params = await request_parameters(request)
    param_map = {key: params.getlist(key)[0] for key in params.keys()}
    logger.info(f"username={param_map.get('username')}, age={param_map.get('age')}")
    return "ok"


@router.api_route("/request-param-multi-map", methods=METHODS)
async def request_param_multi_map(request: Request):
    """Collect parameters into a dict of lists, e.g. ?userIds=id1&userIds=id2."""
    params = await request_parameters(request)
    param_map = {key: params.getlist(key) for key in params.keys()}
    logger.info(f"paramMap={param_map}")
    logger.info(f"username={param_map.get('username')}, age={param_map.get('age')}")
    return "ok"


@router.api_route("/model-attribute-v1", methods=METHODS)
def model_attribute_v1(hello_data: HelloData = Depends(ModelAttribute(HelloData))):
    """
    Bind a HelloData object from parameters.

    A new HelloData is created and each parameter named after one of its
    fields is assigned to it. age=abc fails with a 400 binding error.
    """
    logger.info(f"username={hello_data.username}, age={hello_data.age}")
    logger.info(f"helloData={hello_data!r}")
    return "ok"


@router.api_route("/model-attribute-v2", methods=METHODS)
def model_attribute_v2(hello_data: HelloDataParams):
    """Same binding, declared only through the argument's annotated type."""
    logger.info(f"username={hello_data.username}, age={hello_data.age}")
    return "ok"
