"""
Items Controller

JSON API over the item store:
- GET    /items            list items
- GET    /items/{item_id}  one item, 404 when unknown
- POST   /items            register an item, 201
- PATCH  /items/{item_id}  change the fields sent, 404 when unknown
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from hello_mvc.database import get_db
from hello_mvc.models import Item, ItemCreate, ItemResponse, ItemUpdate
from hello_mvc.repositories import ItemRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/items", tags=["items"])


def get_item_repository(db: Session = Depends(get_db)) -> ItemRepository:
    return ItemRepository(db)


@router.get("", response_model=list[ItemResponse])
def list_items(repository: ItemRepository = Depends(get_item_repository)):
    return repository.find_all()


@router.get("/{item_id}", response_model=ItemResponse)
def get_item(item_id: int, repository: ItemRepository = Depends(get_item_repository)):
    item = repository.find_by_id(item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")
    return item


@router.post("", response_model=ItemResponse, status_code=201)
def create_item(
    item_data: ItemCreate,
    repository: ItemRepository = Depends(get_item_repository),
):
    item = Item(
        item_name=item_data.item_name,
        price=item_data.price,
        quantity=item_data.quantity,
    )
    return repository.save(item)


@router.patch("/{item_id}", response_model=ItemResponse)
def update_item(
    item_id: int,
    update_param: ItemUpdate,
    repository: ItemRepository = Depends(get_item_repository),
):
    """Only the fields present in the request body are changed."""
    item = repository.update(item_id, update_param)
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")
    logger.info(f"Updated item id={item_id} fields={sorted(update_param.model_dump(exclude_unset=True))}")
    return item
