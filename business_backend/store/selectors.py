# store/selectors.py

"""
TENANT RESOLUTION

Every store-scoped endpoint resolves the caller's store first.
A user without an active store gets 403, never an empty result set.
"""

from rest_framework.exceptions import PermissionDenied

from store.models import Store


def get_store_for_user(user) -> Store:
    if not user or not getattr(user, "is_authenticated", False):
        raise PermissionDenied("Store not found")

    store = (
        Store.objects.filter(owner=user, is_active=True)
        .order_by("created_at")
        .first()
    )
    if store is None:
        raise PermissionDenied("Store not found")

    return store
