"""boxgrid: compile text box diagrams to SVG."""

__version__ = "0.1.0"
