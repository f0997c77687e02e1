"""
Request Body Controller

Reading the HTTP message body instead of parameters.

Text bodies:
- v1 reads the raw stream chunk by chunk
- v2 reads the whole body as bytes
- v3 declares the text body as a handler argument

JSON bodies:
- v1 parses the body by hand and validates it into HelloData
- v2 lets FastAPI bind HelloData from the body
- v3 binds the same way and returns the object, which goes out as JSON
"""

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response
from pydantic import ValidationError

from hello_mvc.errors import BindingError
from hello_mvc.models.schemas import HelloData

logger = logging.getLogger(__name__)

router = APIRouter(tags=["request-body"])


async def text_body(request: Request) -> str:
    """Dependency yielding the request body decoded as UTF-8 text."""
    body = await request.body()
    return body.decode("utf-8")


# ============================================
# Text Bodies
# ============================================

@router.post("/request-body-string-v1")
async def request_body_string_v1(request: Request):
    chunks = []
    async for chunk in request.stream():
        chunks.append(chunk)
    message_body = b"".join(chunks).decode("utf-8")
    logger.info(f"messageBody={message_body}")
    return Response(content="ok", media_type="text/plain")


@router.post("/request-body-string-v2", response_class=PlainTextResponse)
async def request_body_string_v2(request: Request):
    message_body = (await request.body()).decode("utf-8")
    logger.info(f"messageBody={message_body}")
    return "ok"


@router.post("/request-body-string-v3", response_class=PlainTextResponse)
def request_body_string_v3(message_body: str = Depends(text_body)):
    logger.info(f"messageBody={message_body}")
    return "ok"


# ============================================
# JSON Bodies
# ============================================

@router.post("/request-body-json-v1", response_class=PlainTextResponse)
async def request_body_json_v1(message_body: str = Depends(text_body)):
    """Parse and validate the JSON body by hand."""
    logger.info(f"messageBody={message_body}")
    try:
        hello_data = HelloData.model_validate(json.loads(message_body))
    except json.JSONDecodeError:
        raise BindingError("body", message_body, "JSON object")
    except ValidationError as e:
        first = e.errors()[0]
        raise BindingError(".".join(str(loc) for loc in first["loc"]), first.get("input"), first["type"])

    logger.info(f"username={hello_data.username}, age={hello_data.age}")
    return "ok"


@router.post("/request-body-json-v2", response_class=PlainTextResponse)
def request_body_json_v2(hello_data: HelloData):
    logger.info(f"username={hello_data.username}, age={hello_data.age}")
    return "ok"


@router.post("/request-body-json-v3", response_model=HelloData)
def request_body_json_v3(hello_data: HelloData):
    """Echo the bound object back as JSON."""
    logger.info(f"username={hello_data.username}, age={hello_data.age}")
    return hello_data
