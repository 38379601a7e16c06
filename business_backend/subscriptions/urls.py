# subscriptions/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from subscriptions.views import SubscriptionViewSet

# SimpleRouter: an empty prefix would collide with DefaultRouter's API root view.
router = SimpleRouter()
router.register(r"", SubscriptionViewSet, basename="subscriptions")

urlpatterns = [
    path("", include(router.urls)),
]
