"""
Controllers Package - The 'C' in MVC

Each controller is a FastAPI APIRouter grouping the endpoints of one
example or feature area. FastAPI calls them routers; they play the
controller role of MVC.
"""

from hello_mvc.controllers.request_param import router as request_param_router
from hello_mvc.controllers.request_header import router as request_header_router
from hello_mvc.controllers.request_body import router as request_body_router
from hello_mvc.controllers.mapping import users_router as mapping_users_router
from hello_mvc.controllers.mapping import router as mapping_router
from hello_mvc.controllers.response_body import router as response_body_router
from hello_mvc.controllers.response_view import router as response_view_router
from hello_mvc.controllers.items import router as items_router
from hello_mvc.controllers.basic_items import router as basic_items_router

__all__ = [
    "request_param_router",
    "request_header_router",
    "request_body_router",
    "mapping_users_router",
    "mapping_router",
    "response_body_router",
    "response_view_router",
    "items_router",
    "basic_items_router",
]
