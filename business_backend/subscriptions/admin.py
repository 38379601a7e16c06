from django.contrib import admin

from subscriptions.models import Subscription


@admin.register(Subscription)
class SubscriptionAdmin(admin.ModelAdmin):
    list_display = ("plan_name", "store", "billing_period", "amount", "status", "next_billing_at")
    list_filter = ("status", "billing_period", "auto_renew")
    search_fields = ("plan_name",)
