"""Shell of a grid-based puzzle game: pygame frame loop, widget GUI, XML resources and an OBJ reader."""

__version__ = "0.1.0"