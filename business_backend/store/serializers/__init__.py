from .store import PublicStoreSerializer, StoreSerializer

__all__ = [
    "PublicStoreSerializer",
    "StoreSerializer",
]
