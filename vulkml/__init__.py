"""Small n-dimensional tensor library with typed storage, slicing and text rendering."""

__version__ = "0.1.0"
__all__ = ["dtype", "tensor", "utils"]