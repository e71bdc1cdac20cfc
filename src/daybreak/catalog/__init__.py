"""Static room and object catalog."""

from .rooms import Catalog, build_catalog, find_object, load_catalog, objects_in

__all__ = [
    "Catalog",
    "build_catalog",
    "find_object",
    "load_catalog",
    "objects_in",
]
