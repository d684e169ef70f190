from store.models.menu_item import MenuItem
from store.models.restaurant import Base, Restaurant

__all__ = ["Base", "MenuItem", "Restaurant"]
