from django.contrib import admin

from legal.models import LegalCase


@admin.register(LegalCase)
class LegalCaseAdmin(admin.ModelAdmin):
    list_display = ("case_number", "title", "store", "case_type", "priority", "status")
    list_filter = ("status", "case_type", "priority")
    search_fields = ("case_number", "title")
