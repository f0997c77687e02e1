"""
SQLAlchemy ORM Entity Models

The item service keeps a single table with no relationships.
"""

from sqlalchemy import Column, Integer, String

from hello_mvc.database import Base


class Item(Base):
    """
    A product sold by the basic item service.

    Price and quantity are optional so an item can be registered
    before it is fully described.
    """
    __tablename__ = "items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    item_name = Column(String(200), nullable=False)
    price = Column(Integer, nullable=True)
    quantity = Column(Integer, nullable=True)

    def __repr__(self) -> str:
        return (
            f"Item(id={self.id}, item_name={self.item_name!r}, "
            f"price={self.price}, quantity={self.quantity})"
        )
