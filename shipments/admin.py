# shipments/admin.py
from django.contrib import admin

from .models import CatalogElement, Shipment, ShipmentElement


class ShipmentElementInline(admin.TabularInline):
    model = ShipmentElement
    extra = 0
    fields = ("description", "quantity")


@admin.register(Shipment)
class ShipmentAdmin(admin.ModelAdmin):
    list_display = (
        "tracking_no", "status", "sender_name", "recipient_name",
        "associated_job_no", "ce_number", "courier_charge", "created_at",
    )
    list_filter = ("status",)
    search_fields = ("tracking_no", "sender_name", "recipient_name", "associated_job_no", "ce_number")
    readonly_fields = ("tracking_no", "created_at", "updated_at", "created_by")
    date_hierarchy = "created_at"
    inlines = [ShipmentElementInline]


@admin.register(CatalogElement)
class CatalogElementAdmin(admin.ModelAdmin):
    list_display = ("brand", "product", "color")
    search_fields = ("brand", "product", "color", "description")
