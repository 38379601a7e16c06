from django.contrib import admin

from hospitality.models import Reservation


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = ("id", "store", "check_in", "check_out", "status", "total_amount")
    list_filter = ("status", "source", "deposit_status")
