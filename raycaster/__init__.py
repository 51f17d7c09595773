"""Grid ray-casting game with textured walls, floors, ceilings, sky and a minimap."""

__version__ = "0.1.0"
__all__ = ["__version__"]