"""
Response Body Controller

HTTP APIs answer with data rather than HTML, so every handler here puts
its result straight into the message body:

- string-v1 builds the Response itself and writes "ok" into it
- string-v2 returns an explicit Response carrying the status code
- string-v3 returns the bare string and lets the response class wrap it
- json-v1 returns an explicit JSONResponse of a HelloData
- json-v2 returns the HelloData and declares the status on the route
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from hello_mvc.models.schemas import HelloData

logger = logging.getLogger(__name__)

router = APIRouter(tags=["response-body"])


def _user_a() -> HelloData:
    hello_data = HelloData()
    hello_data.username = "userA"
    hello_data.age = 20
    return hello_data


@router.get("/response-body-string-v1")
def response_body_v1():
    # Raw Response, no response class or serialization involved
    return Response(content="ok", media_type="text/plain")


@router.get("/response-body-string-v2")
def response_body_v2():
    # status.HTTP_201_CREATED here would answer 201 instead
    return PlainTextResponse("ok", status_code=status.HTTP_200_OK)


@router.get("/response-body-string-v3", response_class=PlainTextResponse)
def response_body_v3():
    return "ok"


@router.get("/response-body-json-v1")
def response_body_json_v1():
    return JSONResponse(content=_user_a().model_dump(), status_code=status.HTTP_200_OK)


@router.get("/response-body-json-v2", response_model=HelloData, status_code=status.HTTP_200_OK)
def response_body_json_v2():
    """The status is fixed by the route; use an explicit response to vary it."""
    return _user_a()
