"""
Item Repository - Data access for the basic item service.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from hello_mvc.models.entities import Item
from hello_mvc.models.schemas import ItemUpdate

logger = logging.getLogger(__name__)


class ItemRepository:
    """Repository for item database operations."""

    def __init__(self, db: Session):
        """Initialize with a database session."""
        self.db = db

    def save(self, item: Item) -> Item:
        """Insert an item and return it with its generated id."""
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        logger.info(f"Saved item id={item.id} name={item.item_name}")
        return item

    def find_by_id(self, item_id: int) -> Optional[Item]:
        return self.db.get(Item, item_id)

    def find_all(self) -> list[Item]:
        return self.db.query(Item).order_by(Item.id).all()

    def update(self, item_id: int, update_param: ItemUpdate) -> Optional[Item]:
        """
        Apply the fields set on update_param to an existing item.

        Returns None when no item has the given id.
        """
        item = self.find_by_id(item_id)
        if item is None:
            return None

        for field, value in update_param.model_dump(exclude_unset=True).items():
            setattr(item, field, value)

        self.db.commit()
        self.db.refresh(item)
        return item

    def count(self) -> int:
        return self.db.query(Item).count()

    def clear_store(self) -> None:
        """Delete every item. Used by tests."""
        self.db.query(Item).delete()
        self.db.commit()
