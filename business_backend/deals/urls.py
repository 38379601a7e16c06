# deals/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from deals.views import DealViewSet

# SimpleRouter: an empty prefix would collide with DefaultRouter's API root view.
router = SimpleRouter()
router.register(r"", DealViewSet, basename="deals")

urlpatterns = [
    path("", include(router.urls)),
]
