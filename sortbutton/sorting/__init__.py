# sortbutton/sorting/__init__.py
"""
Sorting Package.
Placement of the sort button, the item sort itself and the checks that gate both.
"""
from .placement import ContainerShape, RenderInstruction, resolve_placement
from .sort_engine import sort_items, sort_container, SortResult
