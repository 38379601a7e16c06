from .deal import DealViewSet

__all__ = [
    "DealViewSet",
]
