# deals/models/__init__.py

from .deal import Deal

__all__ = [
    "Deal",
]
