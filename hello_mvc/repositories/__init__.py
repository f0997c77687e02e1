"""
Repositories - Data access layer for database operations.
"""

from hello_mvc.repositories.item_repository import ItemRepository

__all__ = ["ItemRepository"]
