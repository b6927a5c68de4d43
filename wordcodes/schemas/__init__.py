# re-export common schemas for simpler imports
from .bounds import Bounds, Unbounded, MinOnly, Range, INT64_MIN, INT64_MAX, bounds_adapter

__all__ = [
    "Bounds",
    "Unbounded",
    "MinOnly",
    "Range",
    "INT64_MIN",
    "INT64_MAX",
    "bounds_adapter",
]
