from .map_provider import IMapProvider

__all__ = [
    "IMapProvider",
]
