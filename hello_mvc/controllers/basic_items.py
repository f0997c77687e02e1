"""
Basic Items Controller

Server-rendered pages over the same item store as the JSON API.

Adding an item follows Post/Redirect/Get: the POST saves and redirects
to the detail page with status=true, so refreshing the page afterwards
repeats a harmless GET instead of registering the item again.
"""

import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from hello_mvc.controllers.items import get_item_repository
from hello_mvc.models import Item, ItemUpdate
from hello_mvc.repositories import ItemRepository
from hello_mvc.views import render

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/basic/items", tags=["basic-items"], default_response_class=HTMLResponse)

ITEM_NAME_MAX_LENGTH = 200

SEED_ITEMS = [
    ("itemA", 10000, 10),
    ("itemB", 20000, 20),
]


def init_items(db: Session) -> int:
    """Insert the sample items into an empty store. Returns how many were added."""
    repository = ItemRepository(db)
    if repository.count() > 0:
        return 0
    for item_name, price, quantity in SEED_ITEMS:
        repository.save(Item(item_name=item_name, price=price, quantity=quantity))
    logger.info(f"Seeded {len(SEED_ITEMS)} items")
    return len(SEED_ITEMS)


def _find_or_404(repository: ItemRepository, item_id: int) -> Item:
    item = repository.find_by_id(item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")
    return item


@router.get("")
def items(request: Request, repository: ItemRepository = Depends(get_item_repository)):
    return render(request, "basic/items", {"items": repository.find_all()})


@router.get("/add")
def add_form(request: Request):
    return render(request, "basic/addForm")


@router.post("/add")
def add_item(
    item_name: str = Form(..., min_length=1, max_length=ITEM_NAME_MAX_LENGTH),
    price: int | None = Form(None),
    quantity: int | None = Form(None),
    repository: ItemRepository = Depends(get_item_repository),
):
    saved = repository.save(Item(item_name=item_name, price=price, quantity=quantity))
    return RedirectResponse(
        url=f"/basic/items/{saved.id}?status=true",
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.get("/{item_id}")
def item(
    request: Request,
    item_id: int,
    saved: bool = Query(False, alias="status"),
    repository: ItemRepository = Depends(get_item_repository),
):
    return render(request, "basic/item", {"item": _find_or_404(repository, item_id), "status": saved})


@router.get("/{item_id}/edit")
def edit_form(
    request: Request,
    item_id: int,
    repository: ItemRepository = Depends(get_item_repository),
):
    return render(request, "basic/editForm", {"item": _find_or_404(repository, item_id)})


@router.post("/{item_id}/edit")
def edit(
    item_id: int,
    item_name: str = Form(..., min_length=1, max_length=ITEM_NAME_MAX_LENGTH),
    price: int | None = Form(None),
    quantity: int | None = Form(None),
    repository: ItemRepository = Depends(get_item_repository),
):
    update_param = ItemUpdate(item_name=item_name, price=price, quantity=quantity)
    if repository.update(item_id, update_param) is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return RedirectResponse(
        url=f"/basic/items/{item_id}",
        status_code=status.HTTP_303_SEE_OTHER,
    )
