# sortbutton/__init__.py
"""
Sort Button.
Overlays a sort control on loot panels and reorders the looted container in place.
"""
__version__ = "2.0.0"
