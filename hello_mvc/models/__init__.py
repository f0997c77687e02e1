"""
Models Package - The 'M' in MVC

- entities.py: SQLAlchemy ORM models for database tables
- schemas.py: Pydantic schemas bound from requests and serialized to responses
"""

from hello_mvc.models.entities import Item
from hello_mvc.models.schemas import (
    HelloData,
    ItemCreate,
    ItemUpdate,
    ItemResponse,
)

__all__ = [
    # ORM entities
    "Item",
    # Schemas
    "HelloData",
    "ItemCreate",
    "ItemUpdate",
    "ItemResponse",
]
