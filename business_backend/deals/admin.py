from django.contrib import admin

from deals.models import Deal


@admin.register(Deal)
class DealAdmin(admin.ModelAdmin):
    list_display = ("deal_number", "store", "status", "deal_type", "final_price", "created_at")
    list_filter = ("status", "deal_type")
    search_fields = ("deal_number",)
    readonly_fields = (
        "commission_amount",
        "agent_share_amount",
        "company_share_amount",
        "closed_date",
        "withdrawn_date",
    )
