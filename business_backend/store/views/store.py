# store/views/store.py

"""
STORE VIEWSET

Purpose:
- Owners manage their own stores (authenticated)
- Public store listing (AllowAny)

Public endpoint:
- GET /api/store/stores/public/
"""

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from store.models import Store
from store.serializers import PublicStoreSerializer, StoreSerializer


class StoreViewSet(viewsets.ModelViewSet):
    """
    Store API (owner-scoped)
    """

    serializer_class = StoreSerializer
    permission_classes = [IsAuthenticated]
    http_method_names = ["get", "post", "patch", "head", "options"]

    def get_queryset(self):
        return Store.objects.filter(owner=self.request.user).order_by("name")

    def perform_create(self, serializer):
        serializer.save(owner=self.request.user)

    @action(
        detail=False,
        methods=["get"],
        url_path="public",
        permission_classes=[AllowAny],
    )
    def public(self, request):
        """
        GET /api/store/stores/public/

        Rules:
        - AllowAny
        - Only active stores
        - Minimal fields
        """
        qs = Store.objects.filter(is_active=True).order_by("name")
        data = PublicStoreSerializer(qs, many=True).data
        return Response(
            {"count": len(data), "results": data}, status=status.HTTP_200_OK
        )
