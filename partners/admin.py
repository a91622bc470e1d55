# partners/admin.py
from django.contrib import admin

from .models import Address


@admin.register(Address)
class AddressAdmin(admin.ModelAdmin):
    list_display = ("name", "contact_person", "phone", "created_at")
    search_fields = ("name", "contact_person", "phone", "address")
    ordering = ("name",)
