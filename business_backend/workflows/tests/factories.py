# workflows/tests/factories.py

"""
Shared test seeding: an owner account with one active store.
"""

from __future__ import annotations

import uuid

from django.contrib.auth import get_user_model

from store.models import Store

User = get_user_model()


def create_owner(*, username: str | None = None, password: str = "pass1234"):
    username = username or f"owner-{uuid.uuid4().hex[:8]}"
    return User.objects.create_user(
        username=username,
        email=f"{username}@example.com",
        password=password,
    )


def create_store(*, owner=None, name: str = "Test Store", business_type: str = Store.BUSINESS_RETAIL):
    owner = owner or create_owner()
    return Store.objects.create(owner=owner, name=name, business_type=business_type)
