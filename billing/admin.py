# billing/admin.py
from django.contrib import admin

from .models import DeliveryNote, DeliveryNoteItem


class DeliveryNoteItemInline(admin.TabularInline):
    model = DeliveryNoteItem
    extra = 0
    fields = ("quantity", "description", "price")


@admin.register(DeliveryNote)
class DeliveryNoteAdmin(admin.ModelAdmin):
    list_display = ("note_number", "date", "client_name", "job_no", "ce_number", "total", "created_at")
    search_fields = ("note_number", "client_name", "job_no", "ce_number")
    readonly_fields = ("note_number", "subtotal", "vat", "total", "created_at", "created_by")
    date_hierarchy = "date"
    inlines = [DeliveryNoteItemInline]
