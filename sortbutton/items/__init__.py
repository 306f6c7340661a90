# sortbutton/items/__init__.py
"""
Items Package.
Item categories, item instances and slot-indexed item containers.
"""
from .categories import ItemCategory, CategoryOrderTable, DEFAULT_CATEGORY_ORDER
from .item import Item
from .container import ItemContainer, ContainerFlag
