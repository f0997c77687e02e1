"""
Request Header Controller

Everything a handler can learn about the request besides its parameters:
method, preferred locale, headers, a single header and a cookie.
"""

import logging

from fastapi import APIRouter, Cookie, Header, Request
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["request-header"], default_response_class=PlainTextResponse)


def preferred_locale(accept_language: str | None) -> str | None:
    """First language tag of an Accept-Language header: "ko-KR,ko;q=0.9" -> "ko-KR"."""
    if not accept_language:
        return None
    first = accept_language.split(",")[0].split(";")[0].strip()
    return first or None


@router.api_route("/headers", methods=["GET", "POST"])
def headers(
    request: Request,
    host: str | None = Header(None),
    accept_language: str | None = Header(None),
    my_cookie: str | None = Cookie(None, alias="myCookie"),
):
    logger.info(f"request={request.method} {request.url}")
    logger.info(f"httpMethod={request.method}")
    logger.info(f"locale={preferred_locale(accept_language)}")
    logger.info(f"headerMap={dict(request.headers)}")
    logger.info(f"header host={host}")
    logger.info(f"myCookie={my_cookie}")
    return "ok"
