# clinic/views.py

"""
CLINIC VIEWSETS

- /api/clinic/admissions/   admitted -> discharged | transferred
- /api/clinic/lab-orders/   ordered -> collected -> processing -> completed
- /api/clinic/complaints/   open -> assigned -> reviewed -> resolved -> closed
"""

from drf_spectacular.utils import extend_schema, extend_schema_view

from clinic.models import Admission, LabOrder, MedicalComplaint
from clinic.serializers import (
    AdmissionCreateSerializer,
    AdmissionSerializer,
    AdmissionUpdateSerializer,
    LabOrderCreateSerializer,
    LabOrderSerializer,
    LabOrderUpdateSerializer,
    MedicalComplaintCreateSerializer,
    MedicalComplaintSerializer,
    MedicalComplaintUpdateSerializer,
)
from workflows.api.viewsets import StoreScopedRecordViewSet


@extend_schema_view(
    create=extend_schema(request=AdmissionCreateSerializer, responses={201: AdmissionSerializer}),
    partial_update=extend_schema(request=AdmissionUpdateSerializer, responses={200: AdmissionSerializer}),
)
class AdmissionViewSet(StoreScopedRecordViewSet):
    resource_tag = "admission"
    model = Admission

    serializer_class = AdmissionSerializer
    create_serializer_class = AdmissionCreateSerializer
    update_serializer_class = AdmissionUpdateSerializer

    filterset_fields = ["status", "patient_id"]


@extend_schema_view(
    create=extend_schema(request=LabOrderCreateSerializer, responses={201: LabOrderSerializer}),
    partial_update=extend_schema(request=LabOrderUpdateSerializer, responses={200: LabOrderSerializer}),
)
class LabOrderViewSet(StoreScopedRecordViewSet):
    resource_tag = "lab_order"
    model = LabOrder

    serializer_class = LabOrderSerializer
    create_serializer_class = LabOrderCreateSerializer
    update_serializer_class = LabOrderUpdateSerializer

    filterset_fields = ["status", "patient_id", "urgency"]


@extend_schema_view(
    create=extend_schema(
        request=MedicalComplaintCreateSerializer, responses={201: MedicalComplaintSerializer}
    ),
    partial_update=extend_schema(
        request=MedicalComplaintUpdateSerializer, responses={200: MedicalComplaintSerializer}
    ),
)
class MedicalComplaintViewSet(StoreScopedRecordViewSet):
    resource_tag = "complaint"
    model = MedicalComplaint

    serializer_class = MedicalComplaintSerializer
    create_serializer_class = MedicalComplaintCreateSerializer
    update_serializer_class = MedicalComplaintUpdateSerializer

    filterset_fields = ["status", "severity", "category"]
