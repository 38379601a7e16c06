# hospitality/urls.py

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from hospitality.views import ReservationViewSet

router = DefaultRouter()
router.register(r"reservations", ReservationViewSet, basename="reservations")

urlpatterns = [
    path("", include(router.urls)),
]
