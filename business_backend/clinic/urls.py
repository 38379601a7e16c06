# clinic/urls.py

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from clinic.views import AdmissionViewSet, LabOrderViewSet, MedicalComplaintViewSet

router = DefaultRouter()
router.register(r"admissions", AdmissionViewSet, basename="admissions")
router.register(r"lab-orders", LabOrderViewSet, basename="lab-orders")
router.register(r"complaints", MedicalComplaintViewSet, basename="complaints")

urlpatterns = [
    path("", include(router.urls)),
]
