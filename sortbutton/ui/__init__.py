# sortbutton/ui/__init__.py
"""
UI Package.
The sort button element template and the overlay sinks that display it.
"""
from .sort_button_ui import SortButtonTemplate
from .overlay import OverlaySink, OverlayButton, PygameOverlaySink
