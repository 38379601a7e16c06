# legal/urls.py

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from legal.views import LegalCaseViewSet

router = DefaultRouter()
router.register(r"cases", LegalCaseViewSet, basename="legal-cases")

urlpatterns = [
    path("", include(router.urls)),
]
