"""
Pydantic Schemas (Data Transfer Objects)

HelloData is the passive holder the parameter binding examples fill in.
The Item* schemas are the JSON contract of the item API.

Naming Convention:
- *Create: Input for creating new resources
- *Update: Partial input for changing a resource
- *Response: Data returned to clients
"""

from pydantic import BaseModel, ConfigDict, Field


# ============================================
# Binding Example Schemas
# ============================================

class HelloData(BaseModel):
    """
    Username and age bound from request parameters or a JSON body.

    Fields absent from the request keep their defaults, the same as
    an object nobody called a setter on.
    """
    username: str | None = None
    age: int = 0


# ============================================
# Item Schemas
# ============================================

class ItemCreate(BaseModel):
    """Item data when registering a new item."""
    item_name: str = Field(..., min_length=1, max_length=200, description="Display name")
    price: int | None = Field(None, description="Unit price")
    quantity: int | None = Field(None, description="Units in stock")


class ItemUpdate(BaseModel):
    """
    Item data when editing an item.

    Only fields present in the request are applied.
    """
    item_name: str | None = Field(None, min_length=1, max_length=200)
    price: int | None = None
    quantity: int | None = None


class ItemResponse(BaseModel):
    """Item data in API responses."""
    id: int
    item_name: str
    price: int | None
    quantity: int | None

    model_config = ConfigDict(from_attributes=True)
