"""
Request Mapping Controllers

users_router composes its prefix with each method-level path and maps
one HTTP verb per handler, the layout of a typical user management API:

    GET     /mapping/users             list users
    POST    /mapping/users             register a user
    GET     /mapping/users/{userId}    find a user
    PATCH   /mapping/users/{userId}    update a user
    DELETE  /mapping/users/{userId}    delete a user

router holds the basic mapping examples: any-method routes, method
restricted routes, path variables, and routes that only match when a
query parameter, header, content type or accepted media type is right.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse

logger = logging.getLogger(__name__)

users_router = APIRouter(
    prefix="/mapping/users",
    tags=["mapping"],
    default_response_class=PlainTextResponse,
)

router = APIRouter(tags=["mapping"], default_response_class=PlainTextResponse)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


# ============================================
# Class-level + method-level composition
# ============================================

@users_router.get("")
def user():
    return "get users"


@users_router.post("")
def add_user():
    return "post user"


@users_router.get("/{userId}")
def find_user(userId: str):
    return f"get userId={userId}"


@users_router.patch("/{userId}")
def update_user(userId: str):
    return f"update userId={userId}"


@users_router.delete("/{userId}")
def delete_user(userId: str):
    return f"delete userId={userId}"


# ============================================
# Mapping conditions
# ============================================

def require_param(name: str, value: str):
    """Only match when query parameter name equals value, else 400."""

    def dependency(request: Request) -> None:
        if request.query_params.get(name) != value:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Parameter conditions \"{name}={value}\" not met",
            )

    return dependency


def require_header(name: str, value: str):
    """Only match when header name equals value, else 404."""

    def dependency(request: Request) -> None:
        if request.headers.get(name) != value:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    return dependency


def consumes(media_type: str):
    """Only match requests whose Content-Type is media_type, else 415."""

    def dependency(request: Request) -> None:
        content_type = request.headers.get("content-type", "")
        if content_type.split(";")[0].strip().lower() != media_type:
            raise HTTPException(
                status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
                detail=f"Content-Type '{content_type}' is not supported",
            )

    return dependency


def accepts(accept_header: str | None, media_type: str) -> bool:
    """Whether an Accept header admits media_type. No header accepts anything."""
    if not accept_header:
        return True
    main_type = media_type.split("/")[0]
    for media_range in accept_header.split(","):
        candidate = media_range.split(";")[0].strip().lower()
        if candidate in (media_type, f"{main_type}/*", "*/*"):
            return True
    return False


def produces(media_type: str):
    """Only match when the client accepts media_type, else 406."""

    def dependency(request: Request) -> None:
        if not accepts(request.headers.get("accept"), media_type):
            raise HTTPException(
                status_code=status.HTTP_406_NOT_ACCEPTABLE,
                detail=f"No acceptable representation, produces {media_type}",
            )

    return dependency


# ============================================
# Basic mapping
# ============================================

@router.api_route("/hello-basic", methods=ALL_METHODS)
def hello_basic():
    logger.info("helloBasic")
    return "ok"


@router.get("/mapping-get-v1")
def mapping_get_v1():
    logger.info("mappingGetV1")
    return "ok"


@router.get("/mapping-get-v2")
def mapping_get_v2():
    """Same as v1, declared with the verb shortcut on the router."""
    logger.info("mapping-get-v2")
    return "ok"


@router.get("/mapping/{userId}")
def mapping_path(userId: str):
    logger.info(f"mappingPath userId={userId}")
    return "ok"


@router.get("/mapping/users/{userId}/orders/{orderId}")
def mapping_path_multi(userId: str, orderId: int):
    logger.info(f"mappingPath userId={userId}, orderId={orderId}")
    return "ok"


@router.get("/mapping-param", dependencies=[Depends(require_param("mode", "debug"))])
def mapping_param():
    logger.info("mappingParam")
    return "ok"


@router.get("/mapping-header", dependencies=[Depends(require_header("mode", "debug"))])
def mapping_header():
    logger.info("mappingHeader")
    return "ok"


@router.post("/mapping-consume", dependencies=[Depends(consumes("application/json"))])
def mapping_consumes():
    logger.info("mappingConsumes")
    return "ok"


@router.post(
    "/mapping-produce",
    response_class=HTMLResponse,
    dependencies=[Depends(produces("text/html"))],
)
def mapping_produces():
    logger.info("mappingProduces")
    return "ok"
