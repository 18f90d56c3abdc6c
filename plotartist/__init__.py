"""Artists that turn plot data into paths, markers and colour meshes for a renderer."""

__version__ = "0.1.0"

__all__ = [
    "paths",
    "norm",
    "artist",
    "markers",
    "lines",
    "patch",
    "bar",
    "quiver",
    "stem",
    "text",
    "grid_color",
]