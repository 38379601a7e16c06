# clinic/tests/test_clinic_api.py

import uuid
from datetime import timedelta

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from clinic.models import Admission, LabOrder, MedicalComplaint
from store.models import Store
from workflows.tests.factories import create_owner, create_store


class ClinicApiTestBase(TestCase):
    def setUp(self):
        self.owner = create_owner(username="clinic-admin")
        self.store = create_store(
            owner=self.owner,
            name="Riverside Clinic",
            business_type=Store.BUSINESS_CLINIC,
        )
        self.patient_id = uuid.uuid4()

        self.client = APIClient()
        self.client.force_authenticate(user=self.owner)


class AdmissionApiTests(ClinicApiTestBase):
    def test_create_starts_admitted(self):
        response = self.client.post(
            reverse("admissions-list"),
            {"patient_id": str(self.patient_id), "admit_diagnosis": "Pneumonia"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["status"], "admitted")

    def test_discharge_stamps_discharge_time(self):
        admission = Admission.objects.create(store=self.store, patient_id=self.patient_id)

        response = self.client.patch(
            reverse("admissions-detail", args=[admission.id]),
            {"status": "discharged", "discharge_summary": "Recovered"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        admission.refresh_from_db()
        self.assertEqual(admission.status, "discharged")
        self.assertIsNotNone(admission.discharge_at)
        self.assertEqual(admission.discharge_summary, "Recovered")

    def test_supplied_discharge_time_is_kept(self):
        admission = Admission.objects.create(store=self.store, patient_id=self.patient_id)
        discharged = timezone.now() - timedelta(hours=6)

        response = self.client.patch(
            reverse("admissions-detail", args=[admission.id]),
            {"status": "discharged", "discharge_at": discharged.isoformat()},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        admission.refresh_from_db()
        self.assertEqual(admission.discharge_at, discharged)

    def test_transferred_is_terminal(self):
        admission = Admission.objects.create(
            store=self.store, patient_id=self.patient_id, status="transferred"
        )

        response = self.client.patch(
            reverse("admissions-detail", args=[admission.id]),
            {"status": "admitted"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data["error"]["message"],
            "Cannot transition from transferred to admitted",
        )

    def test_admissions_can_be_deleted_in_any_status(self):
        admission = Admission.objects.create(
            store=self.store, patient_id=self.patient_id, status="discharged"
        )

        response = self.client.delete(reverse("admissions-detail", args=[admission.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Admission.objects.filter(pk=admission.pk).exists())


class LabOrderApiTests(ClinicApiTestBase):
    def setUp(self):
        super().setUp()
        self.order = LabOrder.objects.create(
            store=self.store,
            patient_id=self.patient_id,
            test_name="Full blood count",
        )

    def patch(self, payload):
        return self.client.patch(
            reverse("lab-orders-detail", args=[self.order.id]), payload, format="json"
        )

    def test_full_pipeline(self):
        for target in ("collected", "processing", "completed"):
            response = self.patch({"status": target})
            self.assertEqual(response.status_code, status.HTTP_200_OK, target)

        self.order.refresh_from_db()
        self.assertEqual(self.order.status, "completed")
        self.assertIsNotNone(self.order.collection_time)
        self.assertIsNotNone(self.order.completed_at)

    def test_cannot_complete_before_processing(self):
        response = self.patch({"status": "completed"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], "ILLEGAL_TRANSITION")
        self.order.refresh_from_db()
        self.assertIsNone(self.order.completed_at)

    def test_cancel_from_any_open_status(self):
        self.order.status = "processing"
        self.order.save()

        response = self.patch({"status": "cancelled"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], "cancelled")

    def test_delete_only_when_ordered_or_cancelled(self):
        self.order.status = "collected"
        self.order.save()

        response = self.client.delete(reverse("lab-orders-detail", args=[self.order.id]))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], "DELETE_NOT_ALLOWED")


class MedicalComplaintApiTests(ClinicApiTestBase):
    def test_resolve_then_close(self):
        complaint = MedicalComplaint.objects.create(
            store=self.store,
            description="Long wait at reception",
            status="reviewed",
        )
        url = reverse("complaints-detail", args=[complaint.id])

        response = self.client.patch(
            url, {"status": "resolved", "resolution": "Extra front desk staff"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        response = self.client.patch(url, {"status": "closed"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        complaint.refresh_from_db()
        self.assertEqual(complaint.status, "closed")
        self.assertIsNotNone(complaint.resolved_at)
        self.assertIsNotNone(complaint.closed_at)

    def test_closed_complaint_cannot_reopen(self):
        complaint = MedicalComplaint.objects.create(
            store=self.store, description="Billing error", status="closed"
        )

        response = self.client.patch(
            reverse("complaints-detail", args=[complaint.id]),
            {"status": "open"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_list_filter_by_status(self):
        MedicalComplaint.objects.create(store=self.store, description="A")
        MedicalComplaint.objects.create(store=self.store, description="B", status="assigned")

        response = self.client.get(reverse("complaints-list"), {"status": "open"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["count"], 1)
