from .store import StoreViewSet

__all__ = [
    "StoreViewSet",
]
