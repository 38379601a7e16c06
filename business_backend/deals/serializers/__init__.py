from .deal import DealCreateSerializer, DealSerializer, DealUpdateSerializer

__all__ = [
    "DealSerializer",
    "DealCreateSerializer",
    "DealUpdateSerializer",
]
