from django.contrib import admin

from store.models import Store


@admin.register(Store)
class StoreAdmin(admin.ModelAdmin):
    list_display = ("name", "code", "business_type", "owner", "is_active", "created_at")
    list_filter = ("business_type", "is_active")
    search_fields = ("name", "code")
